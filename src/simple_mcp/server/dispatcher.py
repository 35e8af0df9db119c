"""ProtocolDispatcher: routes JSON-RPC requests to MCP method handlers."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from opentelemetry import trace
from pydantic import ValidationError

from simple_mcp.server.errors import (
    InvalidParamsError,
    InvalidRequestError,
    MethodNotFoundError,
    ProtocolError,
    ToolNotFoundError,
)
from simple_mcp.server.models import (
    CallToolParams,
    InitializeResult,
    JsonRpcRequest,
    JsonRpcResponse,
    ServerInfo,
    ToolDescriptor,
)
from simple_mcp.server.responses import error_response, success_response, wrap_tool_output
from simple_mcp.utils.telemetry import (
    ATTR_ERROR_CODE,
    ATTR_METHOD,
    ATTR_NOTIFICATION,
    ATTR_REQUEST_ID,
    ATTR_TOOL_NAME,
    get_tracer,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from simple_mcp.server.registry import ToolRegistry

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

DEFAULT_PROTOCOL_VERSION = "2024-11-05"

# Accepted and ignored; never answered.
NOTIFICATION_METHODS = frozenset({"notifications/initialized", "notifications/cancelled"})


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err["loc"])
    return f"{loc}: {err['msg']}" if loc else err["msg"]


class ProtocolDispatcher:
    """Stateless router from request ``method`` to handler.

    The only state it reads is the :class:`ToolRegistry` and the server
    identity it was built with.  Handlers either return a result value or
    raise :class:`ProtocolError`; :meth:`dispatch` turns both into a
    response envelope, or ``None`` when the message is a notification.

    Usage::

        dispatcher = ProtocolDispatcher(registry, ServerInfo(name="demo", version="1.0.0"))
        response = dispatcher.handle_message({"jsonrpc": "2.0", "id": 1, "method": "tools/list"})
    """

    def __init__(
        self,
        registry: ToolRegistry,
        server_info: ServerInfo,
        *,
        protocol_version: str = DEFAULT_PROTOCOL_VERSION,
    ) -> None:
        self._registry = registry
        self._server_info = server_info
        self._protocol_version = protocol_version
        self._handlers: dict[str, Callable[[dict[str, Any]], Any]] = {
            "initialize": self._handle_initialize,
            "tools/list": self._handle_tools_list,
            "tools/call": self._handle_tools_call,
        }

    @property
    def server_info(self) -> ServerInfo:
        return self._server_info

    @property
    def protocol_version(self) -> str:
        return self._protocol_version

    def handle_message(self, message: Any) -> JsonRpcResponse | None:
        """Validate a parsed JSON value as a request and dispatch it."""
        try:
            request = self._parse_request(message)
        except InvalidRequestError as exc:
            logger.warning("Rejected message: %s", exc.message)
            request_id = message.get("id") if isinstance(message, dict) else None
            if isinstance(request_id, bool) or not isinstance(request_id, int | float | str):
                request_id = None
            return error_response(request_id, exc.code, exc.message)
        return self.dispatch(request)

    def dispatch(self, request: JsonRpcRequest) -> JsonRpcResponse | None:
        """Run the handler for *request* and build its response."""
        with _tracer.start_as_current_span("mcp.request") as span:
            span.set_attribute(ATTR_METHOD, request.method)
            span.set_attribute(ATTR_NOTIFICATION, request.is_notification)
            if request.id is not None:
                span.set_attribute(ATTR_REQUEST_ID, str(request.id))

            if request.method in NOTIFICATION_METHODS:
                logger.debug("Notification received: %s", request.method)
                return None

            handler = self._handlers.get(request.method)
            try:
                if handler is None:
                    raise MethodNotFoundError(request.method)
                result = handler(request.params or {})
            except ProtocolError as exc:
                span.set_attribute(ATTR_ERROR_CODE, exc.code)
                logger.info("%s failed with %d: %s", request.method, exc.code, exc.message)
                if request.is_notification:
                    return None
                return error_response(request.id, exc.code, exc.message)

            if request.is_notification:
                logger.debug("Dropping result of notification %s", request.method)
                return None
            return success_response(request.id, result)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _handle_initialize(self, _params: dict[str, Any]) -> dict[str, Any]:
        result = InitializeResult(
            protocol_version=self._protocol_version,
            server_info=self._server_info,
        )
        return result.model_dump(by_alias=True)

    def _handle_tools_list(self, _params: dict[str, Any]) -> dict[str, Any]:
        tools = [
            ToolDescriptor.model_validate(tool.describe()).model_dump(by_alias=True)
            for tool in self._registry.all_tools()
        ]
        return {"tools": tools}

    def _handle_tools_call(self, params: dict[str, Any]) -> dict[str, Any]:
        try:
            call = CallToolParams.model_validate(params)
        except ValidationError as exc:
            raise InvalidParamsError(f"Invalid params: {_first_error(exc)}") from exc

        trace.get_current_span().set_attribute(ATTR_TOOL_NAME, call.name)
        tool = self._registry.lookup(call.name)
        if tool is None:
            raise ToolNotFoundError(call.name)

        arguments = call.arguments if call.arguments is not None else {}
        logger.debug("Calling tool %s", call.name)
        output = tool.call(json.dumps(arguments, allow_nan=False))
        return wrap_tool_output(output)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_request(message: Any) -> JsonRpcRequest:
        if not isinstance(message, dict):
            raise InvalidRequestError("message must be a JSON object")
        try:
            return JsonRpcRequest.model_validate(message)
        except ValidationError as exc:
            raise InvalidRequestError(_first_error(exc)) from exc
