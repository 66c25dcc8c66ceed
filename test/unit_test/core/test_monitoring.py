"""
Unit tests for the Logfire monitoring module.

Covers initialization guards and that every helper stays silent while
monitoring is inactive and forwards to Logfire once it is active.
"""

import sys
from unittest.mock import MagicMock, patch

from scavenger_hunt_ai.core import monitoring


class TestInitializeLogfire:
    def test_disabled(self):
        with patch.object(monitoring, "LOGFIRE_ENABLED", False):
            assert monitoring.initialize_logfire() is False

    def test_enabled_without_token(self):
        with patch.object(monitoring, "LOGFIRE_ENABLED", True), patch.object(monitoring, "LOGFIRE_TOKEN", ""):
            assert monitoring.initialize_logfire() is False

    def test_enabled_with_token_configures_logfire(self):
        fake_logfire = MagicMock()
        app = MagicMock()
        with patch.object(monitoring, "LOGFIRE_ENABLED", True), patch.object(
            monitoring, "LOGFIRE_TOKEN", "token"
        ), patch.object(monitoring, "_logfire_active", False), patch.dict(sys.modules, {"logfire": fake_logfire}):
            assert monitoring.initialize_logfire(app) is True
            fake_logfire.configure.assert_called_once()
            fake_logfire.instrument_sqlalchemy.assert_called_once()
            fake_logfire.instrument_fastapi.assert_called_once_with(app=app)


class TestLoggingHelpers:
    def test_helpers_are_noops_when_inactive(self):
        fake_logfire = MagicMock()
        with patch.object(monitoring, "_logfire_active", False), patch.dict(sys.modules, {"logfire": fake_logfire}):
            monitoring.log_api_request("GET", "/health", 200, 1.0)
            monitoring.log_hunt_generation("h1", "READY", 10.0, theme="space")
            monitoring.log_error("ValueError", "bad")
        fake_logfire.info.assert_not_called()
        fake_logfire.error.assert_not_called()

    def test_helpers_forward_when_active(self):
        fake_logfire = MagicMock()
        with patch.object(monitoring, "_logfire_active", True), patch.dict(sys.modules, {"logfire": fake_logfire}):
            monitoring.log_api_request("GET", "/health", 200, 1.0)
            monitoring.log_hunt_generation("h1", "READY", 10.0, theme="space")
            monitoring.log_error("ValueError", "bad", context={"hunt_id": "h1"})

        assert fake_logfire.info.call_count == 2
        fake_logfire.error.assert_called_once_with("ValueError: bad", hunt_id="h1")

    def test_helpers_never_raise(self):
        fake_logfire = MagicMock()
        fake_logfire.info.side_effect = RuntimeError("down")
        with patch.object(monitoring, "_logfire_active", True), patch.dict(sys.modules, {"logfire": fake_logfire}):
            monitoring.log_api_request("GET", "/health", 200, 1.0)
