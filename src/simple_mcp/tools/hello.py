"""HelloTool: greets the user by name."""

from __future__ import annotations

import json
from typing import Any

from simple_mcp.server.responses import text_content


class HelloTool:
    """Returns ``Hello <value>!``, optionally mentioning a birthday."""

    def name(self) -> str:
        return "HelloTool"

    def describe(self) -> dict[str, Any]:
        return {
            "name": self.name(),
            "description": "A tool that greets users",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "value": {"type": "string", "description": "User name to greet"},
                    "birthday": {"type": "string", "description": "User's birthday"},
                },
                "required": ["value"],
            },
        }

    def call(self, arguments: str) -> list[dict[str, Any]]:
        try:
            args = json.loads(arguments)
        except json.JSONDecodeError:
            return [text_content("Error: Invalid arguments")]
        if not isinstance(args, dict):
            return [text_content("Error: Invalid arguments")]

        user = str(args.get("value", "World"))
        birthday = args.get("birthday") or ""
        if birthday:
            user += f" (born on {birthday})"
        return [text_content(f"Hello {user}!")]
