"""Tests for the loguru sink setup."""

import pytest
from loguru import logger

from sprintlab.core.config import settings
from sprintlab.core.logger import setup_logger


@pytest.fixture(autouse=True)
def _reset_sinks(monkeypatch):
    monkeypatch.setattr(settings, "LOG_LEVEL", "INFO")
    monkeypatch.setattr(settings, "LOG_FILE", None)
    yield
    logger.remove()


class TestSetupLogger:
    def test_level_from_settings(self, monkeypatch, capsys):
        monkeypatch.setattr(settings, "LOG_LEVEL", "WARNING")
        setup_logger()
        logger.info("quiet line")
        logger.warning("loud line")
        err = capsys.readouterr().err
        assert "loud line" in err
        assert "quiet line" not in err

    def test_explicit_level_wins(self, monkeypatch, capsys):
        monkeypatch.setattr(settings, "LOG_LEVEL", "ERROR")
        setup_logger(level="debug")
        logger.debug("detail line")
        assert "detail line" in capsys.readouterr().err

    def test_file_sink_from_settings(self, monkeypatch, tmp_path):
        log_path = tmp_path / "logs" / "sprintlab.log"
        monkeypatch.setattr(settings, "LOG_FILE", str(log_path))
        setup_logger()
        logger.info("to the file")
        logger.remove()
        assert "to the file" in log_path.read_text()

    def test_no_file_sink_by_default(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        setup_logger()
        logger.info("console only")
        assert list(tmp_path.iterdir()) == []
