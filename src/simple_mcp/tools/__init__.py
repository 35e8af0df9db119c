"""Built-in tools served by the default greeting server."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from simple_mcp.server.tool import Tool


def default_tools(source_file: str | Path | None = None) -> list[Tool]:
    """Return the tools registered by ``simple-mcp serve``."""
    from simple_mcp.tools.hello import HelloTool
    from simple_mcp.tools.source import GetSourceCodeTool

    return [HelloTool(), GetSourceCodeTool(source_file)]
