"""GetSourceCodeTool: serves one source file as an MCP resource."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from simple_mcp.server.responses import text_content
from simple_mcp.tools import hello
from simple_mcp.tools.encoding import encode_file

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_FILE = Path(hello.__file__)


class GetSourceCodeTool:
    """Returns the contents of a fixed file as a ``resource`` content item.

    The file defaults to the greeting tool's own module.  Arguments are
    ignored.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path) if path is not None else DEFAULT_SOURCE_FILE

    @property
    def path(self) -> Path:
        return self._path

    @property
    def uri(self) -> str:
        return f"file://{self._path.as_posix()}"

    def name(self) -> str:
        return "GetSourceCode"

    def describe(self) -> dict[str, Any]:
        return {
            "name": self.name(),
            "description": f"Gets the source code of {self._path.name} file",
            "inputSchema": {"type": "object", "properties": {}, "required": []},
        }

    def call(self, arguments: str) -> list[dict[str, Any]]:
        resource = encode_file(self._path)
        if resource is None:
            logger.warning("Could not read %s", self._path)
            return [text_content(f"Error: Could not read {self._path.name} file")]

        resource["uri"] = self.uri
        return [{"type": "resource", "resource": resource}]
