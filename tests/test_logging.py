"""Tests for logging setup."""

import httpx
import pytest
import structlog
from structlog.testing import capture_logs

from saidp_client import verify_response
from saidp_client.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestLogging:
    """Tests for setup_logging and get_logger."""

    def test_json_renderer(self):
        """JSON mode ends the processor chain with a JSON renderer."""
        setup_logging(level="DEBUG", json_logs=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer(self):
        setup_logging()
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_level_filtering(self):
        """Events below the configured level are dropped."""
        setup_logging(level="WARNING")

        with capture_logs() as logs:
            logger = get_logger("saidp_client.test")
            logger.debug("hidden event")
            logger.warning("shown event")

        assert [entry["event"] for entry in logs] == ["shown event"]

    def test_get_logger_uses_filtering_wrapper(self):
        """Bound loggers are built from the configured filtering wrapper."""
        setup_logging(level="INFO")

        bound = get_logger("saidp_client.test").bind(request_id="r-1")

        assert isinstance(bound, structlog.get_config()["wrapper_class"])

    def test_signature_mismatch_logged(self, config):
        """A failed response check emits a warning without secrets."""
        response = httpx.Response(200, content=b"{}", headers={"X-SA-SIGNATURE": "bad"})

        with capture_logs() as logs:
            assert verify_response(response, config) is False

        entry = logs[-1]
        assert entry["event"] == "Response signature mismatch"
        assert entry["log_level"] == "warning"
        assert config.app_key not in str(entry)
