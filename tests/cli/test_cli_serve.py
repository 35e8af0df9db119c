"""Tests for ``simple-mcp serve`` CLI command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING
from unittest.mock import patch

from click.testing import CliRunner

from simple_mcp.cli import main

if TYPE_CHECKING:
    from pathlib import Path

_SESSION = "\n".join(
    [
        '{"jsonrpc":"2.0","id":1,"method":"initialize","params":{}}',
        '{"jsonrpc":"2.0","method":"notifications/initialized"}',
        '{"jsonrpc":"2.0","id":2,"method":"tools/list"}',
        '{"jsonrpc":"2.0","id":3,"method":"tools/call",'
        '"params":{"name":"HelloTool","arguments":{"value":"Ada"}}}',
    ]
) + "\n"


def _responses(stdout: str) -> list[dict[str, object]]:
    return [json.loads(line) for line in stdout.splitlines()]


class TestServe:
    def test_serves_session(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["serve"], input=_SESSION)

        assert result.exit_code == 0
        responses = _responses(result.stdout)
        assert [r["id"] for r in responses] == [1, 2, 3]
        assert responses[0]["result"]["serverInfo"] == {  # type: ignore[index]
            "name": "GreetingServer",
            "version": "1.0.0",
        }
        names = [t["name"] for t in responses[1]["result"]["tools"]]  # type: ignore[index]
        assert names == ["HelloTool", "GetSourceCode"]
        assert responses[2]["result"]["content"][0]["text"] == "Hello Ada!"  # type: ignore[index]

    def test_identity_overrides(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["serve", "--name", "Custom", "--server-version", "4.5.6"],
            input='{"id":1,"method":"initialize"}\n',
        )

        assert result.exit_code == 0
        (response,) = _responses(result.stdout)
        assert response["result"]["serverInfo"] == {  # type: ignore[index]
            "name": "Custom",
            "version": "4.5.6",
        }

    def test_config_file(self, tmp_path: Path) -> None:
        config = tmp_path / "server.yaml"
        config.write_text("name: FromFile\nversion: 9.0.0\n")
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["serve", "--config", str(config)],
            input='{"id":1,"method":"initialize"}\n',
        )

        assert result.exit_code == 0
        (response,) = _responses(result.stdout)
        assert response["result"]["serverInfo"]["name"] == "FromFile"  # type: ignore[index]

    def test_invalid_config_exits_nonzero(self, tmp_path: Path) -> None:
        config = tmp_path / "server.yaml"
        config.write_text("- not\n- a mapping\n")
        runner = CliRunner()
        result = runner.invoke(main, ["serve", "--config", str(config)], input="")

        assert result.exit_code == 1
        assert result.stdout == ""

    def test_exchange_log(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "exchange.log"
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["serve", "--exchange-log", str(log_file)],
            input='{"id":1,"method":"tools/list"}\n',
        )

        assert result.exit_code == 0
        logged = log_file.read_text(encoding="utf-8")
        assert '<- {"id":1,"method":"tools/list"}' in logged
        assert "-> " in logged

    def test_invalid_utf8_line_gets_parse_error(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["serve"],
            input=b'\xff\xfe garbage\n{"jsonrpc":"2.0","id":2,"method":"tools/list"}\n',
        )

        assert result.exit_code == 0
        first, second = _responses(result.stdout)
        assert first["id"] is None
        assert first["error"]["code"] == -32700  # type: ignore[index]
        assert second["id"] == 2
        assert "tools" in second["result"]  # type: ignore[operator]

    def test_empty_input(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["serve"], input="")

        assert result.exit_code == 0
        assert result.stdout == ""

    def test_telemetry_flag_configures_tracing(self) -> None:
        with patch("simple_mcp.utils.telemetry.configure_telemetry") as mock_configure:
            runner = CliRunner()
            result = runner.invoke(main, ["serve", "--telemetry"], input="")

        assert result.exit_code == 0
        (settings, service_name), _ = mock_configure.call_args
        assert settings.enabled is True
        assert settings.otlp_endpoint is None
        assert service_name == "GreetingServer"

    def test_telemetry_missing_sdk_exits_nonzero(self) -> None:
        with patch(
            "simple_mcp.utils.telemetry.configure_telemetry",
            side_effect=ImportError("opentelemetry-sdk is required"),
        ):
            runner = CliRunner()
            result = runner.invoke(main, ["serve", "--telemetry"], input="")

        assert result.exit_code == 1
        assert result.stdout == ""
