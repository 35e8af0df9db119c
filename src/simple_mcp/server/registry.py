"""ToolRegistry: owns the tools a server exposes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from simple_mcp.server.tool import Tool

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Name-to-tool map with last-registration-wins semantics.

    Populate it before serving starts; it is read-only afterwards.

    Usage::

        registry = ToolRegistry()
        registry.register(HelloTool())

        tool = registry.lookup("HelloTool")
        names = [t.name() for t in registry.all_tools()]
    """

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Bind *tool* under its name, replacing any previous binding."""
        name = tool.name()
        if name in self._tools:
            logger.debug("Replacing registered tool %r", name)
        self._tools[name] = tool

    def lookup(self, name: str) -> Tool | None:
        """Return the tool bound to *name*, or ``None``."""
        return self._tools.get(name)

    def all_tools(self) -> list[Tool]:
        """Return every bound tool in registration order."""
        return list(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[Tool]:
        return iter(self.all_tools())
