"""
Application Settings (Pydantic Settings).

Loads configuration from environment variables (.env file or system env).

The settings object is built once at process start and handed to every
component that talks to n8n. It is frozen; nothing mutates it afterwards.

Local usage:
- `.env` file next to the working directory (gitignored)
- or plain environment: `N8N_HOST=https://n8n.example.com N8N_API_KEY=... mcp-n8n-workflow`
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Required configuration value is missing at startup."""

    pass


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Empty environment values fall back to the defaults below.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
        env_ignore_empty=True,
        frozen=True,
    )

    # ========================================================================
    # N8N API
    # ========================================================================
    N8N_HOST: str = Field(
        default="http://localhost:5678",
        description="n8n base URL; /api/v1 is appended when missing",
    )
    N8N_API_KEY: str = Field(
        default="n8n",
        description="Value sent in the X-N8N-API-KEY header",
    )
    N8N_TIMEOUT_SECONDS: float | None = Field(
        default=None,
        description="HTTP timeout for n8n calls (unset = wait indefinitely)",
        gt=0,
    )

    # ========================================================================
    # MCP SERVER
    # ========================================================================
    MCP_SERVER_NAME: str = Field(default="mcp-n8n-workflow")
    MCP_SERVER_VERSION: str = Field(default="0.1.0")

    # ========================================================================
    # LOGGING
    # ========================================================================
    LOG_LEVEL: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    LOG_FORMAT: str = Field(default="json", pattern="^(json|text)$")

    # ========================================================================
    # METRICS
    # ========================================================================
    METRICS_PORT: int = Field(
        default=0,
        description="Port for the Prometheus exporter (0 disables it)",
        ge=0,
        le=65535,
    )

    @model_validator(mode="after")
    def _require_n8n_connection(self) -> "Settings":
        # Defaults above make this unreachable from the environment alone.
        if not self.N8N_HOST or not self.N8N_API_KEY:
            raise ConfigurationError(
                "N8N_HOST and N8N_API_KEY environment variables are required"
            )
        return self
