#!/usr/bin/env python3
"""Tests for environment-driven configuration and the CLI parser."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pinata_mcp import config, main_mcp
from pinata_mcp.config import Config, get_config_summary
from pinata_mcp.main_mcp import build_parser


class RecordingLogger:
    """Collects (level, message, kwargs) tuples."""

    def __init__(self):
        self.records = []

    def _record(self, level, message, **kwargs):
        self.records.append((level, message, kwargs))

    def debug(self, message, **kwargs):
        self._record("debug", message, **kwargs)

    def info(self, message, **kwargs):
        self._record("info", message, **kwargs)

    def warning(self, message, **kwargs):
        self._record("warning", message, **kwargs)

    def error(self, message, **kwargs):
        self._record("error", message, **kwargs)

    def critical(self, message, **kwargs):
        self._record("critical", message, **kwargs)

    def messages(self, level):
        return [(message, kwargs) for lvl, message, kwargs in self.records if lvl == level]


class TestConfig:
    def test_defaults(self, monkeypatch):
        for name in (
            "PINATA_MCP_HOST",
            "PINATA_MCP_PORT",
            "PINATA_MCP_HTTP_TIMEOUT",
            "PINATA_MCP_SESSION_IDLE_TIMEOUT_SECONDS",
            "PINATA_MCP_HOUSEKEEPING_INTERVAL_SECONDS",
        ):
            monkeypatch.delenv(name, raising=False)

        assert Config.get_host() == "0.0.0.0"
        assert Config.get_port() == 3000
        assert Config.get_http_timeout() == 30.0
        assert Config.get_session_idle_timeout() == 0
        assert Config.get_housekeeping_interval() == 60

    def test_invalid_numbers_fall_back(self, monkeypatch):
        monkeypatch.setenv("PINATA_MCP_PORT", "not-a-port")
        monkeypatch.setenv("PINATA_MCP_HTTP_TIMEOUT", "-5")

        assert Config.get_port() == 3000
        assert Config.get_http_timeout() == 30.0

    def test_invalid_numbers_are_logged(self, monkeypatch):
        recorder = RecordingLogger()
        monkeypatch.setattr(config, "logger", recorder)
        monkeypatch.setenv("PINATA_MCP_PORT", "not-a-port")
        monkeypatch.setenv("PINATA_MCP_HOUSEKEEPING_INTERVAL_SECONDS", "0")

        Config.get_port()
        Config.get_housekeeping_interval()

        warnings = recorder.messages("warning")
        assert [message for message, _ in warnings] == ["config.invalid_env", "config.invalid_env"]
        assert warnings[0][1] == {
            "variable": "PINATA_MCP_PORT",
            "provided_value": "not-a-port",
            "default_value": 3000,
        }
        assert warnings[1][1]["variable"] == "PINATA_MCP_HOUSEKEEPING_INTERVAL_SECONDS"

    def test_valid_numbers_are_not_logged(self, monkeypatch):
        recorder = RecordingLogger()
        monkeypatch.setattr(config, "logger", recorder)
        monkeypatch.setenv("PINATA_MCP_PORT", "8080")

        assert Config.get_port() == 8080
        assert recorder.messages("warning") == []

    def test_blank_values_are_unset(self, monkeypatch):
        monkeypatch.setenv("GATEWAY_URL", "   ")
        assert Config.get_gateway_url() is None

    def test_summary_hides_secrets(self, monkeypatch):
        monkeypatch.setenv("PINATA_JWT", "super-secret")
        monkeypatch.setenv("MCP_API_KEYS", "k1,k2")

        summary = get_config_summary()

        assert summary["pinata_jwt_configured"] is True
        assert summary["api_keys_configured"] is True
        assert "super-secret" not in repr(summary)
        assert "k1" not in repr(summary)


class TestCliParser:
    def test_flags(self):
        args = build_parser().parse_args(
            ["--port", "8080", "--no-auth", "--no-serialize-sessions", "--session-idle-timeout", "900"]
        )

        assert args.port == 8080
        assert args.no_auth is True
        assert args.no_serialize_sessions is True
        assert args.session_idle_timeout == 900.0


class TestMain:
    def test_startup_logs_configuration_summary(self, monkeypatch):
        recorder = RecordingLogger()
        monkeypatch.setattr(main_mcp, "logger", recorder)
        monkeypatch.setenv("PINATA_JWT", "super-secret")
        served = []

        def fake_run(coro):
            served.append(coro)
            coro.close()

        monkeypatch.setattr(main_mcp.asyncio, "run", fake_run)

        main_mcp.main(["--no-auth", "--port", "8123"])

        assert len(served) == 1
        summaries = [kw for message, kw in recorder.messages("info") if message == "Configuration loaded"]
        assert len(summaries) == 1
        assert summaries[0]["pinata_jwt_configured"] is True
        assert "super-secret" not in repr(recorder.records)
