"""
Tests for the logging setup.
"""

import json
import logging

from jobly.core.logging_config import setup_logging


class TestSetupLogging:
    """Tests for setup_logging"""

    def setup_method(self):
        root = logging.getLogger()
        self._handlers = root.handlers[:]
        self._level = root.level

    def teardown_method(self):
        root = logging.getLogger()
        root.handlers[:] = self._handlers
        root.setLevel(self._level)

    def test_json_logs(self, capsys):
        """JSON mode writes one JSON object per record with standard fields"""
        setup_logging("INFO", json_logs=True)
        logging.getLogger("jobly.test").info("hello")

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["message"] == "hello"
        assert record["level"] == "INFO"
        assert record["logger"] == "jobly.test"
        assert record["timestamp"].endswith("Z")
        assert "line" not in record

    def test_json_logs_warning_has_location(self, capsys):
        """Warnings and above include the line number and path"""
        setup_logging("INFO", json_logs=True)
        logging.getLogger("jobly.test").warning("careful")

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["level"] == "WARNING"
        assert "line" in record
        assert "pathname" in record

    def test_plain_logs_and_level(self, capsys):
        """Plain mode is human readable and respects the level"""
        setup_logging("WARNING", json_logs=False)
        logger = logging.getLogger("jobly.test")
        logger.info("hidden")
        logger.warning("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "jobly.test - WARNING - shown" in out

    def test_replaces_handlers(self):
        """Calling setup twice does not stack handlers"""
        setup_logging("INFO", json_logs=False)
        setup_logging("INFO", json_logs=False)

        assert len(logging.getLogger().handlers) == 1
