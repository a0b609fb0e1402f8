"""Logging utilities for stackshift analysis runs.

Every module logs through a child of the ``stackshift`` logger. Per-entry
drops go to DEBUG, run summaries to INFO, degraded detection (unparseable
manifests, parser error reports) to WARNING.
"""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "stackshift"

_CONSOLE_FORMAT = f"[{ROOT_LOGGER}] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(component: str | None = None) -> logging.Logger:
    """Return the logger of one stackshift component, e.g. ``archive``."""
    if not component:
        return logging.getLogger(ROOT_LOGGER)
    return logging.getLogger(f"{ROOT_LOGGER}.{component}")


def resolve_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI flags to a level; ``verbose`` wins over ``quiet``."""
    if verbose:
        return logging.DEBUG
    return logging.WARNING if quiet else logging.INFO


def _attach(logger: logging.Logger, handler: logging.Handler, level: int, fmt: str) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """Route stackshift records to stderr and, optionally, to ``log_file``.

    Records do not propagate to the root logger, so stdout stays free for the
    JSON the CLI prints. Calling this again replaces the previous handlers.
    """
    level = resolve_level(verbose=verbose, quiet=quiet)
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(), level, _CONSOLE_FORMAT)
    if log_file is not None:
        _attach(logger, logging.FileHandler(log_file, encoding="utf-8"), level, _FILE_FORMAT)
    return logger


__all__ = ["ROOT_LOGGER", "configure_logging", "get_logger", "resolve_level"]
