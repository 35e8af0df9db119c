"""simple-mcp CLI entrypoint."""

from __future__ import annotations

import click

from simple_mcp import __version__


@click.group()
@click.version_option(version=__version__, prog_name="simple-mcp")
def main() -> None:
    """simple-mcp: a minimal MCP tool server over stdio."""


# Register subcommands
from simple_mcp.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
