"""
Tests pour la configuration loguru.
"""

import json
import logging
import sys

import pytest
from loguru import logger

from src.config import Settings
from src.logging_config import InterceptHandler, configure_logging, console_format


@pytest.fixture
def log_settings(tmp_path) -> Settings:
    return Settings(_env_file=None, log_level="WARNING", log_file=tmp_path / "logs" / "app.log")


@pytest.fixture
def restore_logging():
    """Remet loguru et uvicorn dans leur état par défaut après le test."""
    yield
    logger.remove()
    logger.add(sys.stderr)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        std_logger = logging.getLogger(name)
        std_logger.handlers = []
        std_logger.propagate = True


class TestConsoleFormat:
    """Rendu des champs extra en console."""

    def test_extra_fields_are_rendered_sorted(self):
        fmt = console_format({"extra": {"name": "Latte", "id": 3}})
        assert fmt.index("id</magenta>={extra[id]}") < fmt.index("name</magenta>={extra[name]}")
        assert fmt.endswith("\n{exception}")

    def test_no_extra_fields(self):
        assert "extra" not in console_format({"extra": {}})


class TestConfigureLogging:
    """Installation des sorties."""

    def test_file_sink_writes_json_with_extra(self, log_settings, restore_logging):
        configure_logging(log_settings)
        logger.debug("Film inséré", id=7)
        logger.complete()

        lines = log_settings.log_file.read_text(encoding="utf-8").splitlines()
        records = [json.loads(line)["record"] for line in lines]
        inserted = [r for r in records if r["message"] == "Film inséré"]
        assert inserted[0]["extra"] == {"id": 7}

    def test_uvicorn_loggers_are_intercepted(self, log_settings, restore_logging):
        configure_logging(log_settings)
        captured = []
        logger.add(captured.append, level="INFO", format="{message}")

        logging.getLogger("uvicorn.error").warning("Port déjà utilisé")

        assert any("Port déjà utilisé" in message for message in captured)
        assert isinstance(logging.getLogger("uvicorn.access").handlers[0], InterceptHandler)
        assert logging.getLogger("uvicorn.error").propagate is False
