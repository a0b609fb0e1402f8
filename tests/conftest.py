from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.archive_builder import ArchiveBuilder


@pytest.fixture
def archive_builder(tmp_path: Path) -> ArchiveBuilder:
    """Provide a reusable in-memory archive builder rooted at the pytest tmp_path."""
    return ArchiveBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_stackshift_logger() -> Iterator[None]:
    """Undo configure_logging() so caplog keeps seeing stackshift records."""
    yield
    logger = logging.getLogger("stackshift")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
