"""
mcp-n8n-workflow Configuration Package.

Provides Pydantic Settings loaded from environment variables.
"""

from flow_config.settings import ConfigurationError, Settings

__all__ = ["ConfigurationError", "Settings"]
