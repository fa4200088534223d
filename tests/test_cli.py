"""Tests for CLI commands."""

import httpx
import pytest
import respx
from typer.testing import CliRunner

from recproxy.cli import app

runner = CliRunner()


@pytest.fixture
def record_env(monkeypatch: pytest.MonkeyPatch, temp_dir):
    monkeypatch.setenv("PROXY_MODE", "record")
    monkeypatch.setenv("PROXY_RECORDING_ROOT", str(temp_dir))
    return temp_dir


class TestConfigCommand:
    def test_shows_resolved_settings(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PROXY_HOST", "proxy.internal")
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "PROXY_HOST" in result.output
        assert "proxy.internal" in result.output

    def test_invalid_settings_exit_1(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PROXY_MODE", "replay")
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 1
        assert "Configuration error" in result.output


class TestStartCommand:
    @respx.mock
    def test_start_prints_recording_id(self, record_env):
        route = respx.post("https://localhost:5001/record/start").mock(
            return_value=httpx.Response(200, headers={"x-recording-id": "abc123"}),
        )
        result = runner.invoke(app, ["start", "TestCosmosDBTables"])
        assert result.exit_code == 0
        assert "abc123" in result.output
        assert b"TestCosmosDBTables.json" in route.calls.last.request.content

    @respx.mock
    def test_start_missing_id_exit_1(self, record_env):
        respx.post("https://localhost:5001/record/start").mock(
            return_value=httpx.Response(400, text="bad recording file"),
        )
        result = runner.invoke(app, ["start", "broken"])
        assert result.exit_code == 1
        assert "Failed to start session" in result.output

    @respx.mock
    def test_start_unreachable_proxy_exit_1(self, record_env):
        respx.post("https://localhost:5001/record/start").mock(
            side_effect=httpx.ConnectError("connection refused"),
        )
        result = runner.invoke(app, ["start", "offline"])
        assert result.exit_code == 1
        assert "connection refused" in result.output


class TestStopCommand:
    @respx.mock
    def test_stop_sends_recording_id(self, record_env):
        route = respx.post("https://localhost:5001/record/stop").mock(
            return_value=httpx.Response(200),
        )
        result = runner.invoke(app, ["stop", "abc123"])
        assert result.exit_code == 0
        request = route.calls.last.request
        assert request.headers["x-recording-id"] == "abc123"
        assert request.headers["x-recording-save"] == "true"

    @respx.mock
    def test_stop_failure_exit_1(self, record_env):
        respx.post("https://localhost:5001/record/stop").mock(
            return_value=httpx.Response(500, text="disk full"),
        )
        result = runner.invoke(app, ["stop", "abc123"])
        assert result.exit_code == 1
        assert "disk full" in result.output


class TestVersionCommand:
    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "recproxy" in result.output
