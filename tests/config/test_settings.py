"""Tests for src/config/settings.py — environment-driven settings."""

import logging

import pytest
from pydantic import ValidationError

from src.config.settings import Settings, configure_logging, get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in (
        "DEFAULT_DISK_COUNT", "MIN_DISK_COUNT", "MAX_DISK_COUNT",
        "PEG_CAPACITY", "DEBUG", "LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    root_level = logging.getLogger().level
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    logging.getLogger().setLevel(root_level)


class TestSettings:
    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.default_disk_count == 3
        assert s.min_disk_count == 1
        assert s.max_disk_count == 10
        assert s.peg_capacity == 100
        assert s.debug is False
        assert s.log_level == "INFO"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_DISK_COUNT", "5")
        monkeypatch.setenv("MAX_DISK_COUNT", "12")
        monkeypatch.setenv("DEBUG", "true")
        s = Settings(_env_file=None)
        assert s.default_disk_count == 5
        assert s.max_disk_count == 12
        assert s.debug is True

    def test_default_outside_bounds_rejected(self):
        with pytest.raises(ValidationError, match="min_disk_count <= default_disk_count"):
            Settings(_env_file=None, default_disk_count=11)

    def test_max_above_capacity_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, max_disk_count=200, peg_capacity=100)

    def test_non_positive_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, min_disk_count=0)


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    def test_applies_level(self):
        configure_logging(Settings(_env_file=None, log_level="warning"))
        assert logging.getLogger().level == logging.WARNING

    def test_debug_overrides_level(self):
        configure_logging(Settings(_env_file=None, debug=True, log_level="ERROR"))
        assert logging.getLogger().level == logging.DEBUG
