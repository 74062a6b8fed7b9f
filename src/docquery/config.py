from __future__ import annotations

import os

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _env_flag(name: str, *, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def _env_int(name: str, *, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
    return value


class DocQueryConfig:
    """Process-wide settings, initialised from ``DOCQUERY_*`` environment variables.

    Attributes:
        log_level: Level applied by ``configure_logging`` when none is given.
        trace_extract: Log each expression and its match count at DEBUG.
        rich_logging: Attach the rich console handler in ``configure_logging``.
        max_path_legs: Default leg limit used by ``validate_expression``.
    """

    def __init__(self) -> None:
        self.log_level: str = os.getenv("DOCQUERY_LOG_LEVEL", "WARNING").upper()
        self.trace_extract: bool = _env_flag("DOCQUERY_TRACE_EXTRACT", default=False)
        self.rich_logging: bool = _env_flag("DOCQUERY_RICH_LOGGING", default=True)
        self.max_path_legs: int = _env_int("DOCQUERY_MAX_PATH_LEGS", default=64)


DOCQUERY_CONFIG = DocQueryConfig()


__all__ = ["DOCQUERY_CONFIG", "DocQueryConfig"]
