import pytest
from pydantic import ValidationError

from core.config import AppConfig


def test_defaults(monkeypatch):
    for var in ("HOMECALC_OPENAI_API_KEY", "HOMECALC_MARKET", "HOMECALC_OPENAI_MODEL"):
        monkeypatch.delenv(var, raising=False)
    cfg = AppConfig()
    assert cfg.OPENAI_API_KEY is None
    assert cfg.OPENAI_MODEL == "gpt-4o-mini"
    assert cfg.MARKET == "Dallas"


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("HOMECALC_OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("HOMECALC_MARKET", "Fort Worth")
    monkeypatch.setenv("HOMECALC_LOG_LEVEL", "debug")
    cfg = AppConfig()
    assert cfg.OPENAI_API_KEY == "sk-test"
    assert cfg.MARKET == "Fort Worth"
    assert cfg.LOG_LEVEL == "DEBUG"


def test_blank_key_is_none(monkeypatch):
    monkeypatch.setenv("HOMECALC_OPENAI_API_KEY", "   ")
    assert AppConfig().OPENAI_API_KEY is None


def test_timeout_must_be_positive(monkeypatch):
    monkeypatch.setenv("HOMECALC_ANALYSIS_TIMEOUT_S", "0")
    with pytest.raises(ValidationError):
        AppConfig()
