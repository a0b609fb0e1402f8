"""Technology-stack summary built from languages, framework and tooling files."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..models import UNKNOWN_FRAMEWORK, FileRecord

EXCLUDED_STACK_LANGUAGES = frozenset({"Other", "JSON", "Markdown"})

TOOL_MARKERS: Tuple[Tuple[str, str], ...] = (
    ("webpack", "Webpack"),
    ("vite", "Vite"),
    ("tailwind", "Tailwind CSS"),
    ("eslint", "ESLint"),
    ("prettier", "Prettier"),
    ("jest", "Jest"),
    ("cypress", "Cypress"),
)


def detect_tools(files: Sequence[FileRecord]) -> List[str]:
    file_names = [record.file_name.lower() for record in files]
    return [
        label
        for marker, label in TOOL_MARKERS
        if any(marker in name for name in file_names)
    ]


def build_tech_stack(files: Sequence[FileRecord], framework: str) -> List[str]:
    """Return framework, languages and tools in that order without duplicates."""
    stack: List[str] = []

    def _add(item: str) -> None:
        if item not in stack:
            stack.append(item)

    if framework != UNKNOWN_FRAMEWORK:
        _add(framework)
    for record in files:
        if record.language not in EXCLUDED_STACK_LANGUAGES:
            _add(record.language)
    for tool in detect_tools(files):
        _add(tool)
    return stack


__all__ = ["TOOL_MARKERS", "build_tech_stack", "detect_tools"]
