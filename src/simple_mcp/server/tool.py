"""Tool protocol: the capability contract every served tool satisfies."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Tool(Protocol):
    """A named, schema-described callable unit exposed to the client.

    ``call`` receives the raw ``arguments`` object serialized as JSON text
    and returns either a bare JSON value or a list of MCP content items
    (dicts with a ``type`` key).  Argument-parsing failures must be
    reported as content, never raised.
    """

    def name(self) -> str:
        """Return the unique, stable name of this tool."""
        ...

    def describe(self) -> dict[str, Any]:
        """Return the descriptor: ``name``, ``description``, ``inputSchema``."""
        ...

    def call(self, arguments: str) -> Any:
        """Execute the tool with JSON-encoded *arguments*."""
        ...
