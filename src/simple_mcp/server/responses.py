"""Response builders: JSON-RPC envelopes and MCP content wrappers."""

from __future__ import annotations

import json
from typing import Any

from simple_mcp.server.models import JsonRpcError, JsonRpcResponse, RequestId


def success_response(request_id: RequestId, result: Any) -> JsonRpcResponse:
    """Build a success envelope echoing *request_id*."""
    return JsonRpcResponse(id=request_id, result=result)


def error_response(request_id: RequestId, code: int, message: str) -> JsonRpcResponse:
    """Build an error envelope echoing *request_id*."""
    return JsonRpcResponse(id=request_id, error=JsonRpcError(code=code, message=message))


def text_content(text: str) -> dict[str, Any]:
    """A single MCP ``text`` content item."""
    return {"type": "text", "text": text}


def is_content_list(value: Any) -> bool:
    """Whether *value* is already a list of MCP content items.

    Every item must be an object with a string ``type``; an empty list is
    not treated as content.
    """
    if not isinstance(value, list) or not value:
        return False
    return all(isinstance(item, dict) and isinstance(item.get("type"), str) for item in value)


def wrap_tool_output(value: Any) -> dict[str, Any]:
    """Normalize a tool's return value into a ``tools/call`` result.

    Content lists pass through unchanged.  Any other value becomes one text
    item: strings verbatim, other JSON values serialized.
    """
    if is_content_list(value):
        return {"content": value}
    text = value if isinstance(value, str) else json.dumps(value, allow_nan=False)
    return {"content": [text_content(text)]}
