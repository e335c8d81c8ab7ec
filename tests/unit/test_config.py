"""
Tests pour la configuration pydantic-settings.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from src.config import Settings


class TestSettings:
    """Tests de Settings."""

    def test_defaults(self, monkeypatch):
        for name in ("MOVIESTORE_REPOSITORY_BACKEND", "MOVIESTORE_SEED_DEMO_DATA"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.repository_backend == "memory"
        assert settings.seed_demo_data is False
        assert settings.uses_database is False

    def test_seeding_is_opt_in(self, monkeypatch):
        monkeypatch.setenv("MOVIESTORE_SEED_DEMO_DATA", "true")
        assert Settings(_env_file=None).seed_demo_data is True

    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("MOVIESTORE_REPOSITORY_BACKEND", "sql")
        monkeypatch.setenv("MOVIESTORE_PORT", "9090")
        monkeypatch.setenv("MOVIESTORE_CORS_ORIGINS", '["http://localhost:3000"]')
        settings = Settings(_env_file=None)
        assert settings.uses_database is True
        assert settings.port == 9090
        assert settings.cors_origins == ["http://localhost:3000"]

    def test_unknown_backend_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, repository_backend="redis")

    def test_log_level_is_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")

    def test_log_file_expands_home(self):
        settings = Settings(_env_file=None, log_file="~/moviestore.log")
        assert settings.log_file == Path.home() / "moviestore.log"
