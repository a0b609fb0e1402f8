"""Tests for stackshift.analyzers.tech_stack."""

from __future__ import annotations

from stackshift.analyzers.tech_stack import build_tech_stack, detect_tools
from stackshift.models import FileRecord


def _record(file_name: str, language: str) -> FileRecord:
    return FileRecord(
        file_name=file_name,
        extension="",
        language=language,
        size=1,
        lines=1,
        path=file_name,
    )


def test_stack_orders_framework_languages_then_tools() -> None:
    files = [
        _record("App.tsx", "TypeScript"),
        _record("index.css", "CSS"),
        _record("Button.tsx", "TypeScript"),
        _record("vite.config.ts", "TypeScript"),
        _record(".eslintrc.json", "JSON"),
        _record("notes.md", "Markdown"),
        _record("Dockerfile", "Other"),
    ]
    assert build_tech_stack(files, "React") == [
        "React",
        "TypeScript",
        "CSS",
        "Vite",
        "ESLint",
    ]


def test_unknown_framework_is_not_listed() -> None:
    assert build_tech_stack([_record("main.go", "Go")], "Unknown") == ["Go"]


def test_tools_follow_marker_order() -> None:
    files = [
        _record("jest.config.js", "JavaScript"),
        _record("tailwind.config.js", "JavaScript"),
        _record("Webpack.config.js", "JavaScript"),
        _record("cypress.json", "JSON"),
        _record(".prettierrc", "Other"),
    ]
    assert detect_tools(files) == ["Webpack", "Tailwind CSS", "Prettier", "Jest", "Cypress"]


def test_stack_has_no_duplicates() -> None:
    files = [_record("a.js", "JavaScript"), _record("b.js", "JavaScript")]
    stack = build_tech_stack(files, "Node.js")
    assert stack == ["Node.js", "JavaScript"]
    assert len(stack) == len(set(stack))
