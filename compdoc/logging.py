"""Logging setup shared by the one-shot commands, watch mode and the HTTP service."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

_LOGGER_NAME = "compdoc"
_CONSOLE_FORMAT = "[compdoc] %(levelname)s %(message)s"
_TIMESTAMPED_CONSOLE_FORMAT = "%(asctime)s [compdoc] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# uvicorn's own loggers, routed through the compdoc handlers when serving.
SERVICE_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the compdoc hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    timestamps: bool = False,
    extra_loggers: Iterable[str] = (),
) -> logging.Logger:
    """Point the compdoc logger, plus any ``extra_loggers``, at one set of handlers.

    Long-running commands pass ``timestamps=True`` so console lines carry the
    time of each regeneration. Calling this again replaces the handlers
    installed by the previous call instead of stacking them.
    """
    level = logging.DEBUG if verbose else logging.INFO
    handlers = _build_handlers(level, log_file, timestamps)

    logger = logging.getLogger(_LOGGER_NAME)
    _install(logger, handlers, level)
    for name in extra_loggers:
        _install(logging.getLogger(name), handlers, level)
    return logger


def _build_handlers(level: int, log_file: Path | None, timestamps: bool) -> List[logging.Handler]:
    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(
        logging.Formatter(_TIMESTAMPED_CONSOLE_FORMAT if timestamps else _CONSOLE_FORMAT)
    )
    handlers: List[logging.Handler] = [console]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(file_handler)
    return handlers


def _install(logger: logging.Logger, handlers: List[logging.Handler], level: int) -> None:
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)


__all__ = ["SERVICE_LOGGERS", "configure_logging", "get_logger"]
