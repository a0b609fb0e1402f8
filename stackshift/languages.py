"""Extension-based language classification and code-line counting."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

OTHER_LANGUAGE = "Other"

LANGUAGE_BY_EXTENSION: Mapping[str, str] = MappingProxyType(
    {
        # web
        ".js": "JavaScript",
        ".jsx": "JavaScript",
        ".ts": "TypeScript",
        ".tsx": "TypeScript",
        ".html": "HTML",
        ".htm": "HTML",
        ".css": "CSS",
        ".scss": "SCSS",
        ".sass": "Sass",
        ".less": "Less",
        ".vue": "Vue",
        # backend
        ".py": "Python",
        ".java": "Java",
        ".cs": "C#",
        ".cpp": "C++",
        ".c": "C",
        ".php": "PHP",
        ".rb": "Ruby",
        ".go": "Go",
        ".rs": "Rust",
        ".kt": "Kotlin",
        ".scala": "Scala",
        # mobile
        ".swift": "Swift",
        ".m": "Objective-C",
        ".dart": "Dart",
        # config and other
        ".json": "JSON",
        ".xml": "XML",
        ".yaml": "YAML",
        ".yml": "YAML",
        ".toml": "TOML",
        ".md": "Markdown",
        ".sql": "SQL",
        ".sh": "Shell",
        ".bat": "Batch",
        ".ps1": "PowerShell",
    }
)

_COMMENT_PREFIXES = ("//", "#", "/*", "*")


def file_extension(file_name: str) -> str:
    """Return the lower-cased ``.suffix`` after the last dot, or ``""``."""
    if "." not in file_name:
        return ""
    return "." + file_name.rsplit(".", 1)[1].lower()


def classify_language(file_name: str) -> str:
    """Map a file name to a language label, falling back to ``Other``."""
    extension = file_extension(file_name)
    if not extension:
        return OTHER_LANGUAGE
    return LANGUAGE_BY_EXTENSION.get(extension, OTHER_LANGUAGE)


def count_code_lines(text: str) -> int:
    """Count non-blank, non-comment lines.

    Any non-empty text reports at least one line, even when every line is a
    comment.
    """
    if not text:
        return 0
    code_lines = 0
    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped or stripped == "*/":
            continue
        if stripped.startswith(_COMMENT_PREFIXES):
            continue
        code_lines += 1
    return max(code_lines, 1)


__all__ = [
    "LANGUAGE_BY_EXTENSION",
    "OTHER_LANGUAGE",
    "classify_language",
    "count_code_lines",
    "file_extension",
]
