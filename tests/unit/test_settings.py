"""Unit tests for engine settings."""

import pytest

from profitability.application.services.estimator import EstimateEngine
from profitability.core.settings import EngineSettings, get_settings


@pytest.fixture
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = EngineSettings(_env_file=None)
    assert settings.default_yield_threshold == 5.50
    assert settings.default_tax_rate == 0.08
    assert settings.export_dir == "results"
    assert settings.log_file is None
    assert settings.debug_mode is False


def test_env_override(monkeypatch, clear_settings_cache):
    monkeypatch.setenv("PROFITABILITY_DEFAULT_YIELD_THRESHOLD", "6.25")
    monkeypatch.setenv("PROFITABILITY_DEFAULT_TAX_RATE", "0.1")
    engine = EstimateEngine.from_settings()
    assert engine.default_yield_threshold == 6.25
    assert engine.default_tax_rate == 0.1


def test_cached(clear_settings_cache):
    assert get_settings() is get_settings()
