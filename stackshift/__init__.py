"""Archive analysis and UIR normalization for cross-framework code conversion."""

from .analysis import ProjectAnalyzer
from .archive import ArchiveError, ArchiveWalker
from .config import AnalysisConfig, ConfigError, load_config
from .languages import classify_language, count_code_lines
from .models import FileRecord, LanguageStats, ProjectAnalysis
from .uir import UIRGenerator, load_ast

__version__ = "0.1.0"

__all__ = [
    "AnalysisConfig",
    "ArchiveError",
    "ArchiveWalker",
    "ConfigError",
    "FileRecord",
    "LanguageStats",
    "ProjectAnalysis",
    "ProjectAnalyzer",
    "UIRGenerator",
    "classify_language",
    "count_code_lines",
    "load_ast",
    "load_config",
]
