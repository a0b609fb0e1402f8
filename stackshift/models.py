"""Core data models produced by an archive analysis run."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

UNKNOWN_FRAMEWORK = "Unknown"

PROJECT_TYPES = ("web", "mobile", "backend", "desktop", "unknown")


@dataclass(frozen=True)
class FileRecord:
    """Classification and metrics for one file taken from an archive."""

    file_name: str
    extension: str
    language: str
    size: int
    lines: int
    path: str
    content: Optional[str] = None

    def to_dict(self, include_content: bool = True) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "file_name": self.file_name,
            "extension": self.extension,
            "language": self.language,
            "size": self.size,
            "lines": self.lines,
            "path": self.path,
        }
        if include_content and self.content is not None:
            payload["content"] = self.content
        return payload


@dataclass
class LanguageStats:
    """Per-language totals accumulated over every FileRecord of a run."""

    files: int = 0
    lines: int = 0
    bytes: int = 0
    percentage: float = 0.0


@dataclass
class ProjectAnalysis:
    """Aggregate report over an entire uploaded archive."""

    total_files: int = 0
    total_size: int = 0
    total_lines: int = 0
    languages: Dict[str, LanguageStats] = field(default_factory=dict)
    files: List[FileRecord] = field(default_factory=list)
    detected_framework: str = UNKNOWN_FRAMEWORK
    project_type: str = "unknown"
    tech_stack: List[str] = field(default_factory=list)

    def to_dict(self, include_content: bool = False) -> Dict[str, Any]:
        """Return a JSON-ready mapping; file contents are opt-in."""
        return {
            "total_files": self.total_files,
            "total_size": self.total_size,
            "total_lines": self.total_lines,
            "languages": {
                name: {
                    "files": stats.files,
                    "lines": stats.lines,
                    "bytes": stats.bytes,
                    "percentage": stats.percentage,
                }
                for name, stats in self.languages.items()
            },
            "files": [record.to_dict(include_content) for record in self.files],
            "detected_framework": self.detected_framework,
            "project_type": self.project_type,
            "tech_stack": list(self.tech_stack),
        }
