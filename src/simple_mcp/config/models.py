"""Pydantic models for the server config file consumed by ``simple-mcp serve``."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseModel):
    """Diagnostics go to stderr; ``exchange_log`` records every message line."""

    level: LogLevel = "WARNING"
    exchange_log: str | None = None


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    enabled: bool = False
    otlp_endpoint: str | None = None


class ServerConfig(BaseModel):
    """Top-level server configuration parsed from YAML."""

    name: str = "GreetingServer"
    version: str = "1.0.0"
    protocol_version: str = "2024-11-05"
    source_file: str | None = None
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)
