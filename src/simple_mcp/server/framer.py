"""MessageFramer: newline-delimited JSON over a pair of streams.

One JSON document per line in both directions.  Blank lines are skipped;
lines that are not valid UTF-8 JSON come back as a :class:`ParsedLine`
carrying a :class:`ParseError` instead of raising, so the caller can
answer with a ``-32700`` response and keep reading.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from typing import IO, TYPE_CHECKING, Any

from simple_mcp.server.errors import OutputClosedError, ParseError

if TYPE_CHECKING:
    from collections.abc import Iterator

exchange_logger = logging.getLogger("simple_mcp.exchange")


@dataclass(frozen=True)
class ParsedLine:
    """Outcome of parsing one input line: a JSON value or a parse error."""

    message: Any = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _reject_constant(token: str) -> Any:
    raise ValueError(f"{token} is not valid JSON")


def _parse_finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {token}")
    return value


def parse_line(line: str | bytes) -> ParsedLine:
    """Parse a single non-blank line into a :class:`ParsedLine`.

    Only strict JSON is accepted: ``NaN``, ``Infinity`` and numbers that
    overflow a float are parse errors, as are bytes that are not UTF-8.
    """
    try:
        text = line.decode("utf-8") if isinstance(line, bytes) else line
    except UnicodeDecodeError as exc:
        return ParsedLine(error=ParseError(f"invalid UTF-8: {exc}"))
    try:
        message = json.loads(
            text,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except ValueError as exc:
        return ParsedLine(error=ParseError(str(exc)))
    return ParsedLine(message=message)


class MessageFramer:
    """Reads and writes line-delimited JSON messages.

    *stdin* may be a binary or a text stream; binary lines are decoded
    here so undecodable input is answered rather than fatal.  Nothing but
    framed messages is ever written to *stdout*; diagnostics belong on
    stderr via :mod:`logging`.
    """

    def __init__(self, stdin: IO[bytes] | IO[str], stdout: IO[str]) -> None:
        self._input = stdin
        self._output = stdout

    def read_messages(self) -> Iterator[ParsedLine]:
        """Yield one :class:`ParsedLine` per non-blank line until EOF."""
        for raw in self._input:
            line = raw.strip()
            if not line:
                continue
            if isinstance(line, bytes):
                exchange_logger.info("<- %s", line.decode("utf-8", errors="replace"))
            else:
                exchange_logger.info("<- %s", line)
            yield parse_line(line)

    def write_message(self, data: dict[str, Any]) -> None:
        """Write *data* as a single strict-JSON line and flush."""
        line = json.dumps(data, allow_nan=False)
        try:
            self._output.write(line + "\n")
            self._output.flush()
        except (BrokenPipeError, ValueError) as exc:
            # ValueError: I/O operation on closed file.
            raise OutputClosedError(str(exc)) from exc
        exchange_logger.info("-> %s", line)
