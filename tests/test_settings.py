"""Tests for application settings."""

import pytest

from github_summary.config.settings import Settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test default settings."""
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_SUMMARY__GITHUB_TOKEN", raising=False)

    settings = Settings(_env_file=None)

    assert settings.github_token.get_secret_value() == ""
    assert settings.github_login is None
    assert settings.github_api_url == "https://api.github.com/graphql"
    assert settings.github_rest_url == "https://api.github.com"
    assert settings.user_agent == "github-summary"


def test_settings_token_from_github_token(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that the conventional GITHUB_TOKEN variable is honoured."""
    monkeypatch.delenv("GITHUB_SUMMARY__GITHUB_TOKEN", raising=False)
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_plain")

    assert Settings(_env_file=None).github_token.get_secret_value() == "ghp_plain"


def test_settings_prefixed_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test settings from prefixed environment variables."""
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_plain")
    monkeypatch.setenv("GITHUB_SUMMARY__GITHUB_TOKEN", "ghp_prefixed")
    monkeypatch.setenv("GITHUB_SUMMARY__GITHUB_LOGIN", "octocat")
    monkeypatch.setenv("GITHUB_SUMMARY__GITHUB_API_TIMEOUT", "5")

    settings = Settings(_env_file=None)

    assert settings.github_token.get_secret_value() == "ghp_prefixed"
    assert settings.github_login == "octocat"
    assert settings.github_api_timeout == 5.0


def test_settings_token_is_secret() -> None:
    """Test that the token is masked in output."""
    settings = Settings(github_token="ghp_secret", _env_file=None)

    assert "ghp_secret" not in repr(settings)
    assert settings.github_token.get_secret_value() == "ghp_secret"
