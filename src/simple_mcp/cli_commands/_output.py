"""Shared CLI output formatters."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.table import Table

console = Console()
# ``serve`` owns stdout for the protocol stream; its messages go here.
err_console = Console(stderr=True)


def print_tools_table(descriptors: list[dict[str, Any]], *, as_json: bool = False) -> None:
    """Pretty-print tool descriptors as a table, or as a JSON array."""
    if as_json:
        console.print_json(json.dumps(descriptors))
        return

    table = Table(title="Registered Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Arguments")

    for descriptor in descriptors:
        schema = descriptor.get("inputSchema", {})
        required = set(schema.get("required", []))
        args = [
            f"{arg}*" if arg in required else arg for arg in schema.get("properties", {})
        ]
        table.add_row(
            descriptor.get("name", "?"),
            _truncate(descriptor.get("description", "")),
            ", ".join(args) or "-",
        )

    console.print(table)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
