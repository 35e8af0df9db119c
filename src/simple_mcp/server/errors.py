"""Protocol-level error types.

Each error carries its JSON-RPC error code.  The dispatcher turns any
:class:`ProtocolError` raised by a handler into an error response; none of
them stop the serve loop.
"""

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602


class ProtocolError(Exception):
    """Base error for all protocol-layer failures."""

    code: int = INVALID_REQUEST

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ParseError(ProtocolError):
    """An input line is not valid JSON."""

    code = PARSE_ERROR

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Parse error: {detail}")


class InvalidRequestError(ProtocolError):
    """The message is JSON but not a structurally valid request."""

    code = INVALID_REQUEST

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Invalid Request" + (f": {detail}" if detail else ""))


class MethodNotFoundError(ProtocolError):
    """The request names a method this server does not implement."""

    code = METHOD_NOT_FOUND

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Method not found: {method}")


class InvalidParamsError(ProtocolError):
    """The request's params are unusable for its method."""

    code = INVALID_PARAMS


class ToolNotFoundError(InvalidParamsError):
    """Requested tool does not exist in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Method not found: {name}")


class OutputClosedError(Exception):
    """The output stream can no longer be written to."""
