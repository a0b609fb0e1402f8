"""Tests for stackshift.analyzers.project_type."""

from __future__ import annotations

import pytest

from stackshift.analyzers.project_type import infer_project_type
from stackshift.models import FileRecord


def _files(*languages: str) -> list[FileRecord]:
    return [
        FileRecord(
            file_name=f"file{index}",
            extension="",
            language=language,
            size=1,
            lines=1,
            path=f"src/file{index}",
        )
        for index, language in enumerate(languages)
    ]


@pytest.mark.parametrize(
    ("framework", "expected"),
    [
        ("React Native", "mobile"),
        ("Flutter", "mobile"),
        ("Android", "mobile"),
        ("iOS", "mobile"),
        ("React", "web"),
        ("Vue.js", "web"),
        ("Angular", "web"),
        ("Node.js", "backend"),
        ("Spring Boot", "backend"),
        ("Django", "backend"),
        ("Laravel", "backend"),
    ],
)
def test_framework_decides_when_known(framework: str, expected: str) -> None:
    # Language mix must not override a known framework.
    assert infer_project_type(framework, _files("HTML", "CSS")) == expected


@pytest.mark.parametrize(
    ("languages", "expected"),
    [
        (("Python", "HTML"), "web"),
        (("Kotlin", "Java"), "mobile"),
        (("Go",), "backend"),
        (("C#", "SQL"), "backend"),
        (("Rust", "Markdown"), "unknown"),
        ((), "unknown"),
    ],
)
def test_language_fallback(languages: tuple[str, ...], expected: str) -> None:
    assert infer_project_type("Unknown", _files(*languages)) == expected


def test_desktop_is_never_inferred() -> None:
    assert infer_project_type("Unknown", _files("C++", "C")) == "unknown"
