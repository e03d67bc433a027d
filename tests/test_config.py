"""Tests for plugin settings."""

import pytest

from kanvas_snapshot.config import Settings, get_settings


def test_missing_required_lists_every_empty_parameter():
    """Test that all empty required parameters are reported at once."""
    settings = Settings(
        _env_file=None,
        provider_token="",
        meshery_api_base_url="https://meshery.test",
        meshery_cloud_api_base_url="",
        workflow_access_token="",
    )

    assert settings.missing_required() == ["providerToken", "mesheryCloudAPIBaseURL", "workflowAccessToken"]


def test_fully_configured_settings(settings):
    """Test that nothing is missing when all credentials are set."""
    assert settings.missing_required() == []


def test_settings_from_environment(monkeypatch):
    """Test that settings are read from environment variables."""
    monkeypatch.setenv("PROVIDER_TOKEN", "env-token")
    monkeypatch.setenv("MESHERY_API_BASE_URL", "https://env.meshery.test")
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "5")
    get_settings.cache_clear()

    try:
        settings = get_settings()
    finally:
        get_settings.cache_clear()

    assert settings.provider_token == "env-token"
    assert settings.import_url == "https://env.meshery.test/api/pattern/import"
    assert settings.http_timeout_seconds == 5.0


def test_import_url_tolerates_trailing_slash():
    """Test that a trailing slash on the base URL does not double up."""
    settings = Settings(_env_file=None, meshery_api_base_url="https://meshery.test/")

    assert settings.import_url == "https://meshery.test/api/pattern/import"


def test_dispatch_url_defaults(settings):
    """Test the default workflow dispatch endpoint."""
    assert settings.dispatch_url == (
        "https://api.github.com/repos/meshery-extensions/helm-kanvas-snapshot"
        "/actions/workflows/kanvas.yaml/dispatches"
    )


def test_timeout_must_be_positive():
    """Test that a non-positive timeout is rejected."""
    with pytest.raises(ValueError):
        Settings(_env_file=None, http_timeout_seconds=0)
