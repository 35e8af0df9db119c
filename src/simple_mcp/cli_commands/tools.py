"""``simple-mcp tools``: list the tools the server would expose."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from simple_mcp.cli_commands._output import console, print_tools_table


@click.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Server config YAML file.",
)
@click.option("--json", "as_json", is_flag=True, help="Print descriptors as JSON.")
def tools(config_path: Path | None, as_json: bool) -> None:
    """List the registered tools and their input schemas."""
    from simple_mcp.app import build_server, load_config
    from simple_mcp.errors import ConfigError

    try:
        config = load_config(config_path)
    except ConfigError as exc:
        console.print(f"[red]Config error:[/red] {exc}")
        sys.exit(1)

    server = build_server(config)
    descriptors = [tool.describe() for tool in server.registry.all_tools()]

    if not descriptors and not as_json:
        console.print("[yellow]No tools registered.[/yellow]")
        return

    print_tools_table(descriptors, as_json=as_json)
