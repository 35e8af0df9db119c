"""``simple-mcp serve``: run the MCP server on stdin/stdout."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from simple_mcp.cli_commands._output import err_console


@click.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Server config YAML file.",
)
@click.option("--name", default=None, help="Server name reported to clients.")
@click.option("--server-version", default=None, help="Server version reported to clients.")
@click.option(
    "--source-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="File served by the GetSourceCode tool.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Level of diagnostics written to stderr.",
)
@click.option(
    "--exchange-log",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append every inbound and outbound message to this file.",
)
@click.option("--telemetry", is_flag=True, help="Enable tracing.")
def serve(
    config_path: Path | None,
    name: str | None,
    server_version: str | None,
    source_file: str | None,
    log_level: str | None,
    exchange_log: str | None,
    telemetry: bool,
) -> None:
    """Serve MCP requests from stdin until end-of-stream.

    Responses are written to stdout, one JSON document per line.
    Diagnostics go to stderr.
    """
    from simple_mcp.app import build_server, load_config
    from simple_mcp.errors import ConfigError
    from simple_mcp.utils.logging_setup import configure_logging
    from simple_mcp.utils.telemetry import configure_telemetry

    try:
        config = load_config(config_path)
    except ConfigError as exc:
        err_console.print(f"[red]Config error:[/red] {exc}")
        sys.exit(1)

    if name is not None:
        config.name = name
    if server_version is not None:
        config.version = server_version
    if source_file is not None:
        config.source_file = source_file
    if log_level is not None:
        config.logging.level = log_level.upper()  # type: ignore[assignment]
    if exchange_log is not None:
        config.logging.exchange_log = exchange_log
    if telemetry:
        config.telemetry.enabled = True

    configure_logging(config.logging)

    if config.telemetry.enabled:
        try:
            configure_telemetry(config.telemetry, config.name)
        except ImportError as exc:
            err_console.print(f"[red]Telemetry error:[/red] {exc}")
            sys.exit(1)

    server = build_server(config)
    server.serve()
