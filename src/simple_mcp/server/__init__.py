"""MCP server engine: framing, dispatch, tool registry, response building."""

from simple_mcp.server.dispatcher import ProtocolDispatcher
from simple_mcp.server.errors import (
    InvalidParamsError,
    InvalidRequestError,
    MethodNotFoundError,
    ParseError,
    ProtocolError,
    ToolNotFoundError,
)
from simple_mcp.server.framer import MessageFramer, ParsedLine
from simple_mcp.server.models import JsonRpcError, JsonRpcRequest, JsonRpcResponse, ToolDescriptor
from simple_mcp.server.registry import ToolRegistry
from simple_mcp.server.server import MCPServer
from simple_mcp.server.tool import Tool

__all__ = [
    "InvalidParamsError",
    "InvalidRequestError",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MCPServer",
    "MessageFramer",
    "MethodNotFoundError",
    "ParseError",
    "ParsedLine",
    "ProtocolDispatcher",
    "ProtocolError",
    "Tool",
    "ToolDescriptor",
    "ToolNotFoundError",
    "ToolRegistry",
]
