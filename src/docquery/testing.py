from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

import pytest

from .config import DOCQUERY_CONFIG


@dataclass(frozen=True)
class _DocQueryConfigSnapshot:
    log_level: str
    trace_extract: bool
    rich_logging: bool
    max_path_legs: int

    @classmethod
    def capture(cls) -> "_DocQueryConfigSnapshot":
        return cls(
            log_level=DOCQUERY_CONFIG.log_level,
            trace_extract=DOCQUERY_CONFIG.trace_extract,
            rich_logging=DOCQUERY_CONFIG.rich_logging,
            max_path_legs=DOCQUERY_CONFIG.max_path_legs,
        )

    def restore(self) -> None:
        DOCQUERY_CONFIG.log_level = self.log_level
        DOCQUERY_CONFIG.trace_extract = self.trace_extract
        DOCQUERY_CONFIG.rich_logging = self.rich_logging
        DOCQUERY_CONFIG.max_path_legs = self.max_path_legs


def _apply_test_config() -> None:
    DOCQUERY_CONFIG.log_level = "DEBUG"
    DOCQUERY_CONFIG.trace_extract = True
    DOCQUERY_CONFIG.rich_logging = False
    DOCQUERY_CONFIG.max_path_legs = 64


@contextmanager
def docquery_test_env() -> Generator[None, None, None]:
    """Apply deterministic test settings, restoring the previous ones on exit."""
    snapshot = _DocQueryConfigSnapshot.capture()
    _apply_test_config()
    try:
        yield
    finally:
        snapshot.restore()


@pytest.fixture()
def docquery_test_config() -> Generator[None, None, None]:
    """Run the test with tracing on and the rich handler disabled."""
    with docquery_test_env():
        yield
