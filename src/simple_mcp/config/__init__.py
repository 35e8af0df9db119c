"""Server configuration: models and YAML loader."""

from simple_mcp.config.loader import ConfigLoader
from simple_mcp.config.models import LoggingSettings, ServerConfig, TelemetrySettings

__all__ = [
    "ConfigLoader",
    "LoggingSettings",
    "ServerConfig",
    "TelemetrySettings",
]
