"""Tests for the Typer CLI."""
import pytest
from typer.testing import CliRunner

import gemrest.cli.app as cli_app
from conftest import RecordingHandler, gemini_reply, make_gemini_client
from gemrest.config import env_credential, get_base_url, get_model, get_timeout

runner = CliRunner()


@pytest.fixture
def fake_gemini(monkeypatch):
    """Point the CLI at a mock transport; returns the handler to configure."""
    handler = RecordingHandler(200, gemini_reply("hi there"))

    def _get_client(model=None, console=None):
        return make_gemini_client(handler)

    monkeypatch.setattr(cli_app, "get_client", _get_client)
    return handler


class TestConfig:
    """Tests for environment lookups."""

    def test_defaults(self, clean_env):
        assert get_model() == "gemini-3-flash-preview"
        assert get_base_url() == "https://generativelanguage.googleapis.com/v1beta"
        assert get_timeout() == 60.0
        assert env_credential()() is None

    def test_overrides(self, clean_env):
        clean_env.setenv("GEMINI_MODEL", "gemini-pro-test")
        clean_env.setenv("GEMINI_BASE_URL", "http://localhost:8080/v1/")
        clean_env.setenv("GEMREST_TIMEOUT", "12.5")

        assert get_model() == "gemini-pro-test"
        assert get_base_url() == "http://localhost:8080/v1"
        assert get_timeout() == 12.5

    @pytest.mark.parametrize("raw", ["abc", "-3", "0"])
    def test_invalid_timeout_uses_default(self, clean_env, raw):
        clean_env.setenv("GEMREST_TIMEOUT", raw)
        assert get_timeout() == 60.0

    def test_credential_fallback_variable(self, clean_env):
        clean_env.setenv("API_KEY", "fallback-key")
        assert env_credential()() == "fallback-key"

        clean_env.setenv("GEMINI_API_KEY", "primary-key")
        assert env_credential()() == "primary-key"

    def test_credential_read_at_call_time(self, clean_env):
        """Test that the source sees changes made after it was built."""
        source = env_credential()
        assert source() is None

        clean_env.setenv("GEMINI_API_KEY", "late-key")
        assert source() == "late-key"


class TestHealthCommand:
    def test_reports_missing_key(self, clean_env):
        result = runner.invoke(cli_app.app, ["health"])

        assert result.exit_code == 1
        assert "NOT SET" in result.output

    def test_reports_configured_key(self, clean_env):
        clean_env.setenv("GEMINI_API_KEY", "k")

        result = runner.invoke(cli_app.app, ["health"])

        assert result.exit_code == 0
        assert "SET" in result.output
        assert "gemini-3-flash-preview" in result.output


class TestAskCommand:
    def test_prints_reply(self, fake_gemini):
        result = runner.invoke(cli_app.app, ["ask", "hello"])

        assert result.exit_code == 0
        assert "hi there" in result.output
        assert fake_gemini.last_payload["contents"][0]["parts"][0]["text"] == "hello"

    def test_remote_error_exits_non_zero(self, fake_gemini):
        fake_gemini.status = 429
        fake_gemini.body = {"error": {"message": "quota exceeded"}}

        result = runner.invoke(cli_app.app, ["ask", "hello"])

        assert result.exit_code == 1
        assert "quota exceeded" in result.output

    def test_blank_prompt_exits_non_zero(self, fake_gemini):
        result = runner.invoke(cli_app.app, ["ask", "   "])

        assert result.exit_code == 1
        assert fake_gemini.requests == []


class TestChatCommand:
    def test_exchanges_until_quit(self, fake_gemini):
        result = runner.invoke(cli_app.app, ["chat"], input="hello\n\nquit\n")

        assert result.exit_code == 0
        assert "hi there" in result.output
        assert "Goodbye" in result.output
        assert len(fake_gemini.requests) == 1
