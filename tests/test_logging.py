"""Tests for stackshift.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from stackshift.logging import configure_logging, get_logger, resolve_level


def test_get_logger_nests_under_package() -> None:
    assert get_logger().name == "stackshift"
    assert get_logger("archive").name == "stackshift.archive"


def test_configure_logging_levels() -> None:
    assert configure_logging().level == logging.INFO
    assert configure_logging(quiet=True).level == logging.WARNING
    assert configure_logging(verbose=True, quiet=True).level == logging.DEBUG


def test_configure_logging_does_not_duplicate_handlers(tmp_path: Path) -> None:
    configure_logging()
    logger = configure_logging(log_file=tmp_path / "run.log")

    assert len(logger.handlers) == 2
    get_logger("analysis").info("finished run")
    for handler in logger.handlers:
        handler.flush()
    assert "stackshift.analysis: finished run" in (tmp_path / "run.log").read_text(encoding="utf-8")


def test_resolve_level_prefers_verbose() -> None:
    assert resolve_level() == logging.INFO
    assert resolve_level(quiet=True) == logging.WARNING
    assert resolve_level(verbose=True) == logging.DEBUG
    assert resolve_level(verbose=True, quiet=True) == logging.DEBUG


def test_configured_logger_keeps_records_off_the_root_logger() -> None:
    logger = configure_logging(quiet=True)
    assert logger.propagate is False
    assert [type(handler) for handler in logger.handlers] == [logging.StreamHandler]
