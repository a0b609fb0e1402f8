"""Project analysis pipeline over an uploaded archive."""

from __future__ import annotations

import asyncio
import math
from typing import Callable, Dict, List, Optional, Sequence

from .analyzers import build_tech_stack, detect_framework, infer_project_type
from .archive import ArchiveSource, ArchiveWalker
from .config import AnalysisConfig
from .logging import get_logger
from .models import FileRecord, LanguageStats, ProjectAnalysis

ProgressCallback = Callable[[int], None]


def _round_percentage(lines: int, total_lines: int) -> float:
    if total_lines <= 0:
        return 0.0
    # Half-up rounding to two decimals; round() would use banker's rounding.
    return math.floor(lines / total_lines * 100 * 100 + 0.5) / 100


def summarize_languages(files: Sequence[FileRecord], total_lines: int) -> Dict[str, LanguageStats]:
    """Accumulate per-language counts and their share of all code lines."""
    languages: Dict[str, LanguageStats] = {}
    for record in files:
        stats = languages.setdefault(record.language, LanguageStats())
        stats.files += 1
        stats.lines += record.lines
        stats.bytes += record.size
    for stats in languages.values():
        stats.percentage = _round_percentage(stats.lines, total_lines)
    return languages


class ProjectAnalyzer:
    """Runs the archive walker and detectors to build a ProjectAnalysis.

    The analyzer only holds read-only configuration; every call creates its
    own walker and accumulators, so one instance may serve concurrent runs.
    """

    def __init__(self, config: AnalysisConfig | None = None) -> None:
        self.config = config or AnalysisConfig()
        self.logger = get_logger("analysis")

    def analyze(
        self, archive: ArchiveSource, *, progress: Optional[ProgressCallback] = None
    ) -> ProjectAnalysis:
        """Analyze an archive synchronously.

        ``progress`` is called with the number of completed batches at every
        batch boundary; raising from it abandons the run.
        """
        files: List[FileRecord] = []
        with ArchiveWalker(archive, self.config) as walker:
            for index, batch in enumerate(walker.iter_batches(), start=1):
                files.extend(batch)
                if progress is not None:
                    progress(index)
        return self.summarize(files, walker.manifest_text)

    async def analyze_async(self, archive: ArchiveSource) -> ProjectAnalysis:
        """Analyze an archive, yielding to the event loop between batches."""
        files: List[FileRecord] = []
        with ArchiveWalker(archive, self.config) as walker:
            for batch in walker.iter_batches():
                files.extend(batch)
                await asyncio.sleep(0)
        return self.summarize(files, walker.manifest_text)

    def summarize(
        self, files: Sequence[FileRecord], manifest_text: Optional[str] = None
    ) -> ProjectAnalysis:
        """Build the aggregate report from already-walked records."""
        records = list(files)
        total_size = sum(record.size for record in records)
        total_lines = sum(record.lines for record in records)

        framework = detect_framework(records, manifest_text)
        analysis = ProjectAnalysis(
            total_files=len(records),
            total_size=total_size,
            total_lines=total_lines,
            languages=summarize_languages(records, total_lines),
            files=records,
            detected_framework=framework,
            project_type=infer_project_type(framework, records),
            tech_stack=build_tech_stack(records, framework),
        )
        self.logger.info(
            "Analyzed %d files (%d code lines); framework=%s type=%s",
            analysis.total_files,
            analysis.total_lines,
            analysis.detected_framework,
            analysis.project_type,
        )
        return analysis


__all__ = ["ProgressCallback", "ProjectAnalyzer", "summarize_languages"]
