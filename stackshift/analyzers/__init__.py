"""Detectors that turn FileRecords into framework and stack conclusions."""

from __future__ import annotations

from .framework import (
    FRAMEWORK_MARKERS,
    ManifestError,
    detect_framework,
    detect_frameworks,
    load_manifest_dependencies,
)
from .project_type import infer_project_type
from .tech_stack import build_tech_stack, detect_tools

__all__ = [
    "FRAMEWORK_MARKERS",
    "ManifestError",
    "build_tech_stack",
    "detect_framework",
    "detect_frameworks",
    "detect_tools",
    "infer_project_type",
    "load_manifest_dependencies",
]
