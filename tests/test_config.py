"""Configuration Tests."""

import pytest
from pydantic import ValidationError

from flow_config.settings import ConfigurationError, Settings


def test_settings_load_defaults(monkeypatch):
    """Test settings load with defaults."""
    monkeypatch.delenv("N8N_HOST", raising=False)
    monkeypatch.delenv("N8N_API_KEY", raising=False)

    settings = Settings(_env_file=None)

    assert settings.N8N_HOST == "http://localhost:5678"
    assert settings.N8N_API_KEY == "n8n"
    assert settings.N8N_TIMEOUT_SECONDS is None
    assert settings.METRICS_PORT == 0
    assert settings.MCP_SERVER_NAME == "mcp-n8n-workflow"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("N8N_HOST", "https://n8n.example.com")
    monkeypatch.setenv("n8n_api_key", "secret")

    settings = Settings(_env_file=None)

    assert settings.N8N_HOST == "https://n8n.example.com"
    assert settings.N8N_API_KEY == "secret"


def test_empty_environment_values_fall_back_to_defaults(monkeypatch):
    """An empty env value behaves like an unset one."""
    monkeypatch.setenv("N8N_HOST", "")
    monkeypatch.setenv("N8N_API_KEY", "")

    settings = Settings(_env_file=None)

    assert settings.N8N_HOST == "http://localhost:5678"
    assert settings.N8N_API_KEY == "n8n"


def test_missing_connection_values_raise():
    with pytest.raises(ConfigurationError):
        Settings(_env_file=None, N8N_API_KEY="")


def test_settings_are_frozen(settings):
    with pytest.raises(ValidationError):
        settings.N8N_HOST = "http://elsewhere"


def test_log_level_validated():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, LOG_LEVEL="LOUD")
