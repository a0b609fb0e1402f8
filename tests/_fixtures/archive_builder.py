"""Helper utilities for constructing in-memory ZIP archives in tests."""

from __future__ import annotations

import io
import textwrap
import zipfile
from pathlib import Path
from typing import Dict, Mapping, Union

from stackshift.analysis import ProjectAnalyzer
from stackshift.config import AnalysisConfig
from stackshift.models import ProjectAnalysis

Content = Union[str, bytes]


class ArchiveBuilder:
    """Collects `path -> contents` entries and renders them as a ZIP archive."""

    def __init__(self, tmp_path: Path) -> None:
        self.tmp_path = tmp_path
        self._entries: Dict[str, Content] = {}

    def write(self, files: Mapping[str, Content]) -> "ArchiveBuilder":
        """Add entries; text is dedented so tests can use indented literals."""
        for relative, content in files.items():
            if isinstance(content, str):
                content = textwrap.dedent(content).lstrip("\n")
            self._entries[relative] = content
        return self

    def directory(self, relative: str) -> "ArchiveBuilder":
        """Add an explicit directory entry."""
        self._entries[relative.rstrip("/") + "/"] = b""
        return self

    def build(self) -> bytes:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for name, content in self._entries.items():
                archive.writestr(name, content)
        return buffer.getvalue()

    def save(self, name: str = "upload.zip") -> Path:
        target = self.tmp_path / name
        target.write_bytes(self.build())
        return target

    def analyze(self, config: AnalysisConfig | None = None) -> ProjectAnalysis:
        """Return a fresh analysis of the archive contents."""
        return ProjectAnalyzer(config).analyze(self.build())


def code_lines(count: int, prefix: str = "const value") -> str:
    """Return ``count`` distinct non-comment lines."""
    return "\n".join(f"{prefix}{index} = {index};" for index in range(count)) + "\n"


__all__ = ["ArchiveBuilder", "code_lines"]
