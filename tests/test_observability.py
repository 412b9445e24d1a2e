"""
Tests for observability — logging setup and verbosity flags.
"""

import logging
from pathlib import Path

from restify_boost.core.observability.logging_config import (
    LOG_LEVEL_ENV,
    level_from_flags,
    setup_logging,
)


class TestLevelFromFlags:
    def test_flags(self):
        assert level_from_flags(debug=True, verbose=True) == "DEBUG"
        assert level_from_flags(verbose=True) == "INFO"
        assert level_from_flags(quiet=True) == "ERROR"

    def test_default(self):
        assert level_from_flags() == "WARNING"

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "INFO")
        assert level_from_flags() == "INFO"
        assert level_from_flags(quiet=True) == "ERROR"


class TestSetupLogging:
    def test_console_handler(self):
        setup_logging("INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_unknown_level_is_warning(self):
        setup_logging("LOUD")
        assert logging.getLogger().level == logging.WARNING

    def test_sqlalchemy_quieted(self):
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
        setup_logging("INFO")
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_sqlalchemy_left_alone_at_debug(self):
        logging.getLogger("sqlalchemy.pool").setLevel(logging.NOTSET)
        setup_logging("DEBUG")
        assert logging.getLogger("sqlalchemy.pool").level == logging.NOTSET

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "restify.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        logging.getLogger("restify_boost.test").debug("written to file only")
        for handler in root.handlers:
            handler.flush()
        assert "written to file only" in log_file.read_text()

    def test_file_from_env(self, tmp_path: Path, monkeypatch):
        log_file = tmp_path / "env.log"
        monkeypatch.setenv("RESTIFY_BOOST_LOG_FILE", str(log_file))
        setup_logging("INFO")
        assert any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)
