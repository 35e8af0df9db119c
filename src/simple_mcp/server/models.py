"""MCP server models: JSON-RPC 2.0 envelopes and MCP payloads.

Requests are validated structurally only; ``params`` contents are left to
the method handlers.  Responses always serialize with exactly one of
``result`` or ``error``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

# Strict so that JSON booleans are rejected instead of coerced to 1 or 0.
RequestId = StrictInt | StrictFloat | StrictStr | None

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """An inbound JSON-RPC 2.0 request or notification.

    A message without an ``id`` member is a notification.  An explicit
    ``"id": null`` is still a request and gets a response with a null id.
    """

    model_config = ConfigDict(extra="ignore")

    jsonrpc: str = "2.0"
    method: StrictStr
    id: RequestId = None
    params: dict[str, Any] | None = None

    @property
    def is_notification(self) -> bool:
        return "id" not in self.model_fields_set


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str


class JsonRpcResponse(BaseModel):
    """An outbound JSON-RPC 2.0 response message."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: RequestId = None
    result: Any = None
    error: JsonRpcError | None = None

    def to_wire(self) -> dict[str, Any]:
        """Dump to the on-the-wire shape, keeping ``id`` even when null."""
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            data["error"] = self.error.model_dump()
        else:
            data["result"] = self.result
        return data


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class ToolDescriptor(BaseModel):
    """A tool definition as returned by ``tools/list``."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(
        default_factory=lambda: {"type": "object", "properties": {}},
        alias="inputSchema",
    )


class CallToolParams(BaseModel):
    """``params`` of a ``tools/call`` request."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr = ""
    arguments: Any = Field(default_factory=dict)


class ServerInfo(BaseModel):
    name: str
    version: str


class InitializeResult(BaseModel):
    """Result of the ``initialize`` handshake."""

    model_config = ConfigDict(populate_by_name=True)

    protocol_version: str = Field(alias="protocolVersion")
    capabilities: dict[str, Any] = Field(default_factory=lambda: {"tools": {}})
    server_info: ServerInfo = Field(alias="serverInfo")
