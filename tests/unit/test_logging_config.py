"""Unit tests for booleint logging configuration."""

from __future__ import annotations

import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from unittest import mock

import booleint
from booleint.logging_config import LOGGER_NAME, JsonFormatter, _get_level, _get_logger


class TestSilentByDefault:
    """The library produces no output unless configured."""

    def test_logger_has_null_handler(self):
        logger = logging.getLogger(LOGGER_NAME)
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_integration_is_silent(self, capfd):
        booleint.integrate(lambda x: x, 0.0, 1.0, 1e-8)
        captured = capfd.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestEnableConsoleLogging:
    """Tests for enable_console_logging."""

    def test_sets_level(self):
        booleint.enable_console_logging(level="DEBUG")
        assert _get_logger().level == logging.DEBUG

    def test_outputs_passes_to_stderr(self, capfd):
        booleint.enable_console_logging(level="DEBUG")
        booleint.integrate(lambda x: x, 0.0, 1.0, 1e-8)
        captured = capfd.readouterr()
        assert "pass 1" in captured.err
        assert "converged" in captured.err

    def test_custom_format(self, capfd):
        booleint.enable_console_logging(level="INFO", format="[CUSTOM] %(message)s")
        logging.getLogger(f"{LOGGER_NAME}.test").info("hello")
        assert "[CUSTOM] hello" in capfd.readouterr().err


class TestEnableFileLogging:
    """Tests for enable_file_logging."""

    def test_creates_rotating_handler(self, tmp_path):
        handler = booleint.enable_file_logging(tmp_path / "run.log")
        assert isinstance(handler, RotatingFileHandler)

    def test_creates_parent_directories(self, tmp_path):
        log_file = tmp_path / "nested" / "dir" / "run.log"
        booleint.enable_file_logging(log_file)
        assert log_file.parent.exists()

    def test_writes_to_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        handler = booleint.enable_file_logging(log_file, level="INFO")
        booleint.integrate(lambda x: x, 0.0, 1.0, 1e-8)
        handler.flush()
        assert "converged" in log_file.read_text()


class TestEnableJsonLogging:
    """Tests for enable_json_logging."""

    def test_outputs_valid_json(self, capfd):
        booleint.enable_json_logging(level="INFO")
        logging.getLogger(f"{LOGGER_NAME}.test").info("json message")

        line = capfd.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["message"] == "json message"
        assert payload["level"] == "INFO"
        assert payload["logger"] == f"{LOGGER_NAME}.test"

    def test_formatter_includes_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.getLogger(LOGGER_NAME).makeRecord(
                LOGGER_NAME, logging.ERROR, __file__, 1, "failed", None,
                exc_info=sys.exc_info(),
            )
        payload = json.loads(JsonFormatter().format(record))
        assert "ValueError: boom" in payload["exception"]


class TestConfigureFromEnv:
    """Tests for configure_from_env."""

    def test_respects_level(self):
        with mock.patch.dict(os.environ, {"BI_LOGGING": "DEBUG"}, clear=True):
            booleint.configure_from_env()
        assert _get_logger().level == logging.DEBUG

    def test_respects_log_file(self, tmp_path):
        log_file = tmp_path / "env.log"
        with mock.patch.dict(os.environ, {"BI_LOG_FILE": str(log_file)}, clear=True):
            booleint.configure_from_env()
        assert any(isinstance(h, RotatingFileHandler) for h in _get_logger().handlers)

    def test_json_file(self, tmp_path):
        log_file = tmp_path / "env.json"
        env = {"BI_LOG_FILE": str(log_file), "BI_LOG_JSON": "1"}
        with mock.patch.dict(os.environ, env, clear=True):
            booleint.configure_from_env()
        handlers = [h for h in _get_logger().handlers if isinstance(h, RotatingFileHandler)]
        assert isinstance(handlers[0].formatter, JsonFormatter)

    def test_does_nothing_without_env(self):
        before = list(_get_logger().handlers)
        with mock.patch.dict(os.environ, {}, clear=True):
            booleint.configure_from_env()
        assert _get_logger().handlers == before


class TestLevels:
    """Tests for set_level, _get_level and disable_logging."""

    def test_set_level_by_string(self):
        booleint.set_level("WARNING")
        assert _get_logger().level == logging.WARNING

    def test_unknown_level_name_falls_back_to_info(self):
        assert _get_level("chatty") == logging.INFO

    def test_disable_logging_silences_output(self, capfd):
        booleint.enable_console_logging(level="DEBUG")
        booleint.disable_logging()
        booleint.integrate(lambda x: x, 0.0, 1.0, 1e-8)
        assert capfd.readouterr().err == ""
        assert all(isinstance(h, logging.NullHandler) for h in _get_logger().handlers)
