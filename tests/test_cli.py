"""Tests for the Typer CLI."""
import pytest
from typer.testing import CliRunner

from glasschat.cli import app as cli_app
from glasschat.cli.providers import get_client, model_label
from glasschat.inference import HuggingFaceInferenceClient

runner = CliRunner()


@pytest.fixture
def no_token(monkeypatch):
    monkeypatch.delenv("HF_API_TOKEN", raising=False)


class TestProviders:
    """Tests for client creation from the environment."""

    def test_missing_token(self, no_token):
        assert get_client() is None

    def test_client_from_environment(self, monkeypatch):
        monkeypatch.setenv("HF_API_TOKEN", "hf_test")
        monkeypatch.setenv("HF_API_URL", "https://example.test/models/org/model")
        monkeypatch.setenv("GLASSCHAT_TIMEOUT", "5")

        client = get_client()

        assert isinstance(client, HuggingFaceInferenceClient)
        assert client.api_url == "https://example.test/models/org/model"
        assert model_label(client) == "org/model"

    def test_bad_timeout_falls_back(self, monkeypatch):
        monkeypatch.setenv("HF_API_TOKEN", "hf_test")
        monkeypatch.setenv("GLASSCHAT_TIMEOUT", "soon")
        assert get_client() is not None


class TestCommands:
    """Tests for the glasschat commands."""

    def test_health_without_token(self, no_token):
        result = runner.invoke(cli_app.app, ["health"])
        assert result.exit_code == 1
        assert "NOT SET" in result.output

    def test_health_with_token(self, monkeypatch):
        monkeypatch.setenv("HF_API_TOKEN", "hf_test")
        monkeypatch.delenv("HF_API_URL", raising=False)
        result = runner.invoke(cli_app.app, ["health"])
        assert result.exit_code == 0
        assert "blenderbot-400M-distill" in result.output

    def test_ask_without_token(self, no_token):
        result = runner.invoke(cli_app.app, ["ask", "hello"])
        assert result.exit_code == 1

    def test_ask_prints_reply(self, monkeypatch, client):
        monkeypatch.setattr(cli_app, "require_client", lambda console=None: client)

        result = runner.invoke(cli_app.app, ["ask", "hello"])

        assert result.exit_code == 0
        assert "echo: hello" in result.output
        assert client.closed

    def test_chat_loop(self, monkeypatch, client):
        """Test that line mode sends each line until 'exit'."""
        monkeypatch.setattr(cli_app, "require_client", lambda console=None: client)

        result = runner.invoke(cli_app.app, ["chat"], input="hi\n\nthere\nexit\n")

        assert result.exit_code == 0
        assert client.prompts == ["hi", "there"]
        assert "echo: there" in result.output
        assert "Goodbye" in result.output
