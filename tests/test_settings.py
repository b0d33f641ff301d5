"""
Tests for settings loading.
"""

import logging

import pytest
from pydantic import ValidationError

from timeforged_mcp.settings import DEFAULT_SERVER_URL, Settings


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate from TF_* variables and any .env in the working directory."""
    for key in ("TF_SERVER_URL", "TF_API_KEY", "TF_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


class TestSettings:

    def test_defaults(self, clean_env):
        settings = Settings()

        assert settings.server_url == DEFAULT_SERVER_URL == "http://127.0.0.1:6175"
        assert settings.api_key == ""
        assert not settings.has_api_key

    def test_from_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv("TF_SERVER_URL", "http://tf.example:9000")
        monkeypatch.setenv("TF_API_KEY", "k3y")

        settings = Settings()

        assert settings.server_url == "http://tf.example:9000"
        assert settings.api_key == "k3y"
        assert settings.has_api_key

    def test_from_dotenv(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("TF_API_KEY=from-file\n", encoding="utf-8")
        assert Settings().api_key == "from-file"

    def test_immutable(self, clean_env):
        settings = Settings()
        with pytest.raises(ValidationError):
            settings.api_key = "changed"


class TestMissingKeyWarning:

    def test_warns_without_key(self, clean_env, caplog):
        with caplog.at_level(logging.WARNING, logger="timeforged_mcp.settings"):
            assert Settings().warn_if_unauthenticated()

        assert "TF_API_KEY not set" in caplog.text

    def test_silent_with_key(self, clean_env, caplog):
        with caplog.at_level(logging.WARNING, logger="timeforged_mcp.settings"):
            assert not Settings(api_key="k3y").warn_if_unauthenticated()

        assert caplog.text == ""
