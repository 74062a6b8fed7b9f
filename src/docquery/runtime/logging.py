from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from ..config import DOCQUERY_CONFIG

LOGGER_NAME = "docquery"


class _DocQueryRichConsoleHandler(RichHandler):
    """Rich console handler owned by docquery, installed at most once."""


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Set the docquery log level and attach the rich console handler.

    Safe to call repeatedly; the handler is only added the first time.
    """

    logger = get_logger()
    logger.setLevel(DOCQUERY_CONFIG.log_level if level is None else level)

    if DOCQUERY_CONFIG.rich_logging and not any(
        isinstance(handler, _DocQueryRichConsoleHandler) for handler in logger.handlers
    ):
        logger.addHandler(
            _DocQueryRichConsoleHandler(
                console=Console(stderr=True),
                show_path=False,
                markup=False,
                rich_tracebacks=False,
            )
        )
    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "get_logger"]
