"""MCPServer: owns the tool registry and runs the stdio serve loop."""

from __future__ import annotations

import logging
import sys
from typing import IO, TYPE_CHECKING

from simple_mcp.server.dispatcher import DEFAULT_PROTOCOL_VERSION, ProtocolDispatcher
from simple_mcp.server.errors import OutputClosedError
from simple_mcp.server.framer import MessageFramer
from simple_mcp.server.models import ServerInfo
from simple_mcp.server.registry import ToolRegistry
from simple_mcp.server.responses import error_response

if TYPE_CHECKING:
    from simple_mcp.server.tool import Tool

logger = logging.getLogger(__name__)

DEFAULT_SERVER_VERSION = "1.0.0"


class MCPServer:
    """A single-client MCP server over line-delimited JSON-RPC.

    Requests are handled one at a time, in the order they are read; each
    produces at most one response line.  Register tools before calling
    :meth:`serve`.

    Usage::

        server = MCPServer("GreetingServer")
        server.register_tool(HelloTool())
        server.serve()  # stdin/stdout until EOF
    """

    def __init__(
        self,
        name: str,
        version: str = DEFAULT_SERVER_VERSION,
        *,
        protocol_version: str = DEFAULT_PROTOCOL_VERSION,
    ) -> None:
        self._info = ServerInfo(name=name, version=version)
        self._registry = ToolRegistry()
        self._dispatcher = ProtocolDispatcher(
            self._registry, self._info, protocol_version=protocol_version
        )

    @property
    def name(self) -> str:
        return self._info.name

    @property
    def version(self) -> str:
        return self._info.version

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    @property
    def dispatcher(self) -> ProtocolDispatcher:
        return self._dispatcher

    def set_server_name(self, name: str) -> None:
        """Change the name reported in ``initialize``."""
        self._info.name = name

    def set_server_version(self, version: str) -> None:
        """Change the version reported in ``initialize``."""
        self._info.version = version

    def register_tool(self, tool: Tool) -> None:
        """Expose *tool*; a later tool with the same name replaces it."""
        self._registry.register(tool)
        logger.debug("Registered tool %s", tool.name())

    def serve(
        self, stdin: IO[bytes] | IO[str] | None = None, stdout: IO[str] | None = None
    ) -> None:
        """Serve requests from *stdin* until end-of-stream.

        By default lines are read as bytes from ``sys.stdin.buffer`` and
        decoded per line, so a non-UTF-8 line gets a parse error response.

        Returns early, without raising, if *stdout* is closed by the peer.
        """
        framer = MessageFramer(
            stdin if stdin is not None else sys.stdin.buffer,
            stdout if stdout is not None else sys.stdout,
        )
        logger.info(
            "%s %s serving %d tool(s)", self._info.name, self._info.version, len(self._registry)
        )
        try:
            for parsed in framer.read_messages():
                if not parsed.ok:
                    assert parsed.error is not None
                    logger.warning("%s", parsed.error.message)
                    response = error_response(None, parsed.error.code, parsed.error.message)
                else:
                    response = self._dispatcher.handle_message(parsed.message)
                if response is not None:
                    framer.write_message(response.to_wire())
        except OutputClosedError as exc:
            logger.warning("Output stream closed, stopping: %s", exc)
            return
        logger.info("Input stream closed, shutting down")
