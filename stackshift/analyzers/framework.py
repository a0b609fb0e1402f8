"""Framework detection from dependency manifests and file-name markers."""

from __future__ import annotations

import json
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from ..logging import get_logger
from ..models import UNKNOWN_FRAMEWORK, FileRecord

_DEPENDENCY_GROUPS = ("dependencies", "devDependencies", "peerDependencies")

# Ordered on purpose: the first framework to match wins.
FRAMEWORK_MARKERS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("React", ("react", "@types/react", "react-dom", "next", "gatsby")),
    ("Vue.js", ("vue", "@vue/cli", "nuxt", "quasar")),
    ("Angular", ("@angular/core", "@angular/cli", "angular", "ng-")),
    ("Node.js", ("express", "koa", "fastify", "nest")),
    ("React Native", ("react-native", "@react-native", "metro")),
    ("Flutter", ("flutter", "pubspec.yaml")),
    ("Android", ("android", "gradle", "kotlin-android")),
    ("iOS", ("ios", "swift", "cocoapods")),
    ("Spring Boot", ("spring-boot", "spring-web", "spring-data")),
    ("Django", ("django", "requirements.txt")),
    ("Laravel", ("laravel", "composer.json")),
)

logger = get_logger("analyzers.framework")


class ManifestError(ValueError):
    """Raised when manifest text is not a usable dependency descriptor."""


def load_manifest_dependencies(manifest_text: str) -> Set[str]:
    """Return the merged runtime, dev and peer dependency names of a manifest."""
    if manifest_text.startswith("\ufeff"):
        manifest_text = manifest_text[1:]
    try:
        data = json.loads(manifest_text)
    except (json.JSONDecodeError, TypeError) as exc:
        raise ManifestError(f"manifest is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestError("manifest root must be an object")

    names: Set[str] = set()
    for group in _DEPENDENCY_GROUPS:
        deps = data.get(group)
        if isinstance(deps, dict):
            names.update(str(key) for key in deps)
    return names


def _match_frameworks(candidates: Iterable[str]) -> List[str]:
    values = list(candidates)
    matched: List[str] = []
    for framework, markers in FRAMEWORK_MARKERS:
        if any(marker in value for marker in markers for value in values):
            matched.append(framework)
    return matched


def detect_frameworks(
    files: Sequence[FileRecord], manifest_text: Optional[str] = None
) -> List[str]:
    """Return every framework with evidence, manifest matches first.

    Within each evidence source the table order is preserved, so the first
    element is the detection result.
    """
    detected: List[str] = []

    if manifest_text is not None:
        try:
            dependencies = load_manifest_dependencies(manifest_text)
        except ManifestError as exc:
            logger.warning("Failed to parse dependency manifest: %s", exc)
        else:
            detected.extend(_match_frameworks(dependencies))

    file_names = [record.file_name.lower() for record in files]
    detected.extend(_match_frameworks(file_names))
    return detected


def detect_framework(
    files: Sequence[FileRecord], manifest_text: Optional[str] = None
) -> str:
    """Return the dominant framework label or ``Unknown``."""
    detected = detect_frameworks(files, manifest_text)
    return detected[0] if detected else UNKNOWN_FRAMEWORK


__all__ = [
    "FRAMEWORK_MARKERS",
    "ManifestError",
    "detect_framework",
    "detect_frameworks",
    "load_manifest_dependencies",
]
