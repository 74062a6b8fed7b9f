import pytest

from docquery.config import DocQueryConfig


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "DOCQUERY_LOG_LEVEL",
        "DOCQUERY_TRACE_EXTRACT",
        "DOCQUERY_RICH_LOGGING",
        "DOCQUERY_MAX_PATH_LEGS",
    ):
        monkeypatch.delenv(name, raising=False)

    config = DocQueryConfig()

    assert config.log_level == "WARNING"
    assert config.trace_extract is False
    assert config.rich_logging is True
    assert config.max_path_legs == 64


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOCQUERY_LOG_LEVEL", "debug")
    monkeypatch.setenv("DOCQUERY_TRACE_EXTRACT", "yes")
    monkeypatch.setenv("DOCQUERY_RICH_LOGGING", "0")
    monkeypatch.setenv("DOCQUERY_MAX_PATH_LEGS", "8")

    config = DocQueryConfig()

    assert config.log_level == "DEBUG"
    assert config.trace_extract is True
    assert config.rich_logging is False
    assert config.max_path_legs == 8


def test_rejects_bad_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOCQUERY_TRACE_EXTRACT", "maybe")
    with pytest.raises(ValueError, match="DOCQUERY_TRACE_EXTRACT must be a boolean"):
        DocQueryConfig()

    monkeypatch.delenv("DOCQUERY_TRACE_EXTRACT")
    monkeypatch.setenv("DOCQUERY_MAX_PATH_LEGS", "zero")
    with pytest.raises(ValueError, match="must be an integer"):
        DocQueryConfig()

    monkeypatch.setenv("DOCQUERY_MAX_PATH_LEGS", "0")
    with pytest.raises(ValueError, match="must be >= 1"):
        DocQueryConfig()
