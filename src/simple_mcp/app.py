"""Wiring for the default greeting server."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from simple_mcp.config.loader import ConfigLoader
from simple_mcp.config.models import ServerConfig
from simple_mcp.server.server import MCPServer
from simple_mcp.tools import default_tools

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def load_config(path: Path | None) -> ServerConfig:
    """Load *path* if given, otherwise return the default config."""
    if path is None:
        return ServerConfig()
    return ConfigLoader(path).load()


def build_server(config: ServerConfig) -> MCPServer:
    """Create an :class:`MCPServer` from *config* with the built-in tools registered."""
    server = MCPServer(
        config.name,
        config.version,
        protocol_version=config.protocol_version,
    )
    for tool in default_tools(config.source_file):
        server.register_tool(tool)
    logger.debug("Built server %s with %d tool(s)", config.name, len(server.registry))
    return server
