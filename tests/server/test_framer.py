"""Tests for line-delimited JSON framing."""

import io
import json
import logging
from unittest.mock import MagicMock

import pytest

from simple_mcp.server.errors import PARSE_ERROR, OutputClosedError
from simple_mcp.server.framer import MessageFramer, parse_line


class TestParseLine:
    def test_valid_json(self) -> None:
        parsed = parse_line('{"method": "tools/list", "id": 1}')
        assert parsed.ok
        assert parsed.message == {"method": "tools/list", "id": 1}

    def test_invalid_json_returns_error_value(self) -> None:
        parsed = parse_line("{not json")
        assert not parsed.ok
        assert parsed.message is None
        assert parsed.error is not None
        assert parsed.error.code == PARSE_ERROR
        assert parsed.error.message.startswith("Parse error: ")

    def test_non_object_json_still_parses(self) -> None:
        assert parse_line("[1, 2]").message == [1, 2]

    @pytest.mark.parametrize(
        "line",
        [
            '{"id": NaN, "method": "m"}',
            '{"id": 1, "params": {"x": Infinity}}',
            '{"id": 1, "params": {"x": -Infinity}}',
            '{"id": 1e999}',
        ],
    )
    def test_non_finite_numbers_are_parse_errors(self, line: str) -> None:
        parsed = parse_line(line)
        assert not parsed.ok
        assert parsed.error is not None
        assert parsed.error.code == PARSE_ERROR

    def test_bytes_are_decoded_as_utf8(self) -> None:
        parsed = parse_line('{"value": "caf\u00e9"}'.encode())
        assert parsed.message == {"value": "caf\u00e9"}

    def test_invalid_utf8_is_parse_error(self) -> None:
        parsed = parse_line(b"\xff\xfe garbage")
        assert not parsed.ok
        assert parsed.error is not None
        assert parsed.error.code == PARSE_ERROR
        assert "UTF-8" in parsed.error.message


class TestReadMessages:
    def test_skips_blank_lines(self) -> None:
        stdin = io.StringIO('\n   \n{"id": 1}\n\t\n{"id": 2}\n')
        framer = MessageFramer(stdin, io.StringIO())
        messages = [p.message for p in framer.read_messages()]
        assert messages == [{"id": 1}, {"id": 2}]

    def test_bad_line_does_not_stop_reading(self) -> None:
        stdin = io.StringIO('garbage\n{"id": 3}\n')
        framer = MessageFramer(stdin, io.StringIO())
        parsed = list(framer.read_messages())
        assert len(parsed) == 2
        assert not parsed[0].ok
        assert parsed[1].message == {"id": 3}

    def test_last_line_without_newline(self) -> None:
        framer = MessageFramer(io.StringIO('{"id": 9}'), io.StringIO())
        assert [p.message for p in framer.read_messages()] == [{"id": 9}]

    def test_empty_stream(self) -> None:
        framer = MessageFramer(io.StringIO(""), io.StringIO())
        assert list(framer.read_messages()) == []

    def test_binary_stream_with_undecodable_line(self) -> None:
        stdin = io.BytesIO(b'\xff\xfe garbage\n\n{"id": 2}\n')
        framer = MessageFramer(stdin, io.StringIO())
        parsed = list(framer.read_messages())
        assert len(parsed) == 2
        assert not parsed[0].ok
        assert parsed[1].message == {"id": 2}


class TestWriteMessage:
    def test_writes_one_json_line(self) -> None:
        stdout = io.StringIO()
        framer = MessageFramer(io.StringIO(), stdout)
        framer.write_message({"jsonrpc": "2.0", "id": 1, "result": {"text": "a\nb"}})
        out = stdout.getvalue()
        assert out.endswith("\n")
        assert out.count("\n") == 1
        assert json.loads(out) == {"jsonrpc": "2.0", "id": 1, "result": {"text": "a\nb"}}

    def test_non_finite_number_is_not_written(self) -> None:
        stdout = io.StringIO()
        framer = MessageFramer(io.StringIO(), stdout)
        with pytest.raises(ValueError, match="JSON compliant"):
            framer.write_message({"id": 1, "result": float("nan")})
        assert stdout.getvalue() == ""

    def test_flushes(self) -> None:
        stdout = MagicMock()
        MessageFramer(io.StringIO(), stdout).write_message({"id": 1})
        stdout.flush.assert_called_once()

    def test_broken_pipe_raises_output_closed(self) -> None:
        stdout = MagicMock()
        stdout.write.side_effect = BrokenPipeError("pipe")
        framer = MessageFramer(io.StringIO(), stdout)
        with pytest.raises(OutputClosedError):
            framer.write_message({"id": 1})

    def test_closed_stream_raises_output_closed(self) -> None:
        stdout = io.StringIO()
        stdout.close()
        framer = MessageFramer(io.StringIO(), stdout)
        with pytest.raises(OutputClosedError):
            framer.write_message({"id": 1})


class TestExchangeLogging:
    def test_logs_both_directions(self, caplog: pytest.LogCaptureFixture) -> None:
        stdout = io.StringIO()
        framer = MessageFramer(io.StringIO('{"id": 1}\n'), stdout)
        with caplog.at_level(logging.INFO, logger="simple_mcp.exchange"):
            list(framer.read_messages())
            framer.write_message({"id": 1, "result": None})
        messages = [r.getMessage() for r in caplog.records if r.name == "simple_mcp.exchange"]
        assert messages[0] == '<- {"id": 1}'
        assert messages[1].startswith("-> ")
