"""Coarse project-category inference."""

from __future__ import annotations

from typing import Iterable

from ..models import FileRecord

MOBILE_FRAMEWORKS = frozenset({"React Native", "Flutter", "Android", "iOS"})
WEB_FRAMEWORKS = frozenset({"React", "Vue.js", "Angular"})
BACKEND_FRAMEWORKS = frozenset({"Node.js", "Spring Boot", "Django", "Laravel"})

WEB_LANGUAGES = frozenset({"HTML", "CSS", "JavaScript", "TypeScript"})
MOBILE_LANGUAGES = frozenset({"Swift", "Kotlin", "Dart"})
BACKEND_LANGUAGES = frozenset({"Python", "Java", "C#", "PHP", "Go"})


def infer_project_type(framework: str, files: Iterable[FileRecord]) -> str:
    """Return web, mobile, backend or unknown for a detected framework.

    The framework decides when it is known; otherwise the language mix does,
    with web ranking above mobile and mobile above backend.
    """
    if framework in MOBILE_FRAMEWORKS:
        return "mobile"
    if framework in WEB_FRAMEWORKS:
        return "web"
    if framework in BACKEND_FRAMEWORKS:
        return "backend"

    languages = {record.language for record in files}
    if languages & WEB_LANGUAGES:
        return "web"
    if languages & MOBILE_LANGUAGES:
        return "mobile"
    if languages & BACKEND_LANGUAGES:
        return "backend"
    return "unknown"


__all__ = ["infer_project_type"]
