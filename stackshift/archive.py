"""Streaming walker over uploaded ZIP archives."""

from __future__ import annotations

import io
import lzma
import os
import zipfile
import zlib
from types import TracebackType
from typing import BinaryIO, Dict, Iterator, List, Optional, Sequence, Type, Union

from .config import AnalysisConfig
from .languages import classify_language, count_code_lines, file_extension
from .logging import get_logger
from .models import FileRecord

ArchiveSource = Union[bytes, bytearray, str, os.PathLike, BinaryIO]

# Failures raised while inflating a single member of an opened archive.
_ENTRY_READ_ERRORS = (
    zipfile.BadZipFile,
    NotImplementedError,
    RuntimeError,
    OSError,
    EOFError,
    zlib.error,
    lzma.LZMAError,
)

_SKIPPED_DIR_MARKERS = (
    "node_modules/",
    ".git/",
    "dist/",
    "build/",
    ".cache/",
    "coverage/",
)

_SKIPPED_SUFFIXES = (
    ".min.js",
    ".min.css",
    ".bundle.js",
    ".chunk.js",
    ".map",
    ".log",
    ".tmp",
)

_SKIPPED_FILENAMES = frozenset(
    {
        ".ds_store",
        "thumbs.db",
        "readme.md",
        "changelog.md",
        "license",
    }
)


class ArchiveError(RuntimeError):
    """Raised when an uploaded archive cannot be opened at all."""


def sanitize_path(name: str) -> str:
    """Normalise an archive entry name into a relative POSIX path."""
    normalised = name.replace("\\", "/")
    trailing = "/" if normalised.endswith("/") else ""
    parts = [part for part in normalised.split("/") if part not in ("", ".", "..")]
    if not parts:
        return ""
    return "/".join(parts) + trailing


def should_skip(path: str, extra_patterns: Sequence[str] = ()) -> bool:
    """Return True when an entry path matches a build, vendor or clutter rule."""
    lower = path.lower()
    if any(marker in lower for marker in _SKIPPED_DIR_MARKERS):
        return True
    if lower.endswith(_SKIPPED_SUFFIXES):
        return True
    if lower.rsplit("/", 1)[-1] in _SKIPPED_FILENAMES:
        return True
    return any(pattern.lower() in lower for pattern in extra_patterns if pattern)


def _open_archive(source: ArchiveSource) -> zipfile.ZipFile:
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(bytes(source))
    try:
        return zipfile.ZipFile(source)
    except (zipfile.BadZipFile, zipfile.LargeZipFile) as exc:
        raise ArchiveError(f"Failed to open archive: {exc}") from exc
    except OSError as exc:
        raise ArchiveError(f"Failed to read archive: {exc}") from exc


class ArchiveWalker:
    """Walks one archive in fixed-size batches and emits FileRecords.

    A walker serves exactly one pass: the entry iterator is consumed as it
    goes and cannot be restarted. The archive is closed when the pass ends
    or on ``close()``; use the walker as a context manager when it may never
    be iterated. Dependency manifests (``package.json`` by default) are
    captured for framework detection instead of being emitted.
    """

    def __init__(self, source: ArchiveSource, config: AnalysisConfig | None = None) -> None:
        self.config = config or AnalysisConfig()
        self.logger = get_logger("archive")
        self._archive = _open_archive(source)
        self._manifest_names = frozenset(self.config.manifest_names)
        self._manifests: Dict[str, str] = {}
        self._consumed = False

    def close(self) -> None:
        self._archive.close()

    def __enter__(self) -> "ArchiveWalker":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()

    @property
    def manifests(self) -> Dict[str, str]:
        """Captured manifest texts keyed by archive path, in archive order."""
        return dict(self._manifests)

    @property
    def manifest_text(self) -> Optional[str]:
        """Return the manifest nearest to the archive root, if one was seen."""
        if not self._manifests:
            return None
        path = min(self._manifests, key=lambda item: item.count("/"))
        return self._manifests[path]

    def iter_batches(self) -> Iterator[List[FileRecord]]:
        """Yield the surviving records of each batch of raw entries.

        Control returns to the consumer after every batch; that boundary is
        where a host may pause, report progress or abandon the run.
        """
        if self._consumed:
            raise RuntimeError("ArchiveWalker instances can only be walked once")
        self._consumed = True

        batch_size = max(self.config.batch_size, 1)
        with self._archive:
            entries = self._archive.infolist()
            self.logger.debug("Archive holds %d entries", len(entries))
            for start in range(0, len(entries), batch_size):
                batch: List[FileRecord] = []
                for info in entries[start : start + batch_size]:
                    record = self._process_entry(info)
                    if record is not None:
                        batch.append(record)
                yield batch

    def walk(self) -> Iterator[FileRecord]:
        """Yield every surviving record, ignoring batch boundaries."""
        for batch in self.iter_batches():
            yield from batch

    def _process_entry(self, info: zipfile.ZipInfo) -> Optional[FileRecord]:
        if info.is_dir():
            return None
        path = sanitize_path(info.filename)
        if not path or path.endswith("/"):
            return None
        if should_skip(path, self.config.exclude_paths):
            return None
        if info.file_size > self.config.max_entry_bytes:
            self.logger.debug("Skipping %s (%d bytes exceeds limit)", path, info.file_size)
            return None

        text = self._read_text(info, path)
        if text is None:
            return None

        file_name = path.rsplit("/", 1)[-1]
        if file_name in self._manifest_names:
            self._manifests.setdefault(path, text)
            return None

        size = len(text)
        return FileRecord(
            file_name=file_name,
            extension=file_extension(file_name),
            language=classify_language(file_name),
            size=size,
            lines=count_code_lines(text),
            path=path,
            content=text if size <= self.config.max_content_chars else None,
        )

    def _read_text(self, info: zipfile.ZipInfo, path: str) -> Optional[str]:
        try:
            raw = self._archive.read(info)
        except _ENTRY_READ_ERRORS as exc:
            self.logger.debug("Dropping %s: unreadable entry (%s)", path, exc)
            return None
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            self.logger.debug("Dropping %s: not UTF-8 text", path)
            return None


__all__ = [
    "ArchiveError",
    "ArchiveSource",
    "ArchiveWalker",
    "sanitize_path",
    "should_skip",
]
