"""File encoding for MCP ``resource`` content items."""

from __future__ import annotations

import base64
from pathlib import Path
from typing import Any

DEFAULT_MIME_TYPE = "application/octet-stream"

MIME_TYPES: dict[str, str] = {
    # Images
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "svg": "image/svg+xml",
    # Source code
    "cpp": "text/x-c++src",
    "cxx": "text/x-c++src",
    "cc": "text/x-c++src",
    "c": "text/x-csrc",
    "h": "text/x-c++hdr",
    "hh": "text/x-c++hdr",
    "hpp": "text/x-c++hdr",
    "js": "text/javascript",
    "ts": "text/typescript",
    "py": "text/x-python",
    "java": "text/x-java",
    "rs": "text/x-rust",
    "go": "text/x-go",
    "html": "text/html",
    "css": "text/css",
    "xml": "text/xml",
    "json": "application/json",
    "md": "text/markdown",
    # Documents
    "txt": "text/plain",
    "pdf": "application/pdf",
}


def guess_mime_type(path: str | Path) -> str:
    """Map the file extension of *path* to a MIME type (case-sensitive)."""
    suffix = Path(path).suffix
    return MIME_TYPES.get(suffix[1:], DEFAULT_MIME_TYPE) if suffix else DEFAULT_MIME_TYPE


def is_text_mime_type(mime_type: str) -> bool:
    return mime_type.startswith("text/") or mime_type == "application/json"


def encode_file(path: str | Path) -> dict[str, Any] | None:
    """Read *path* into a resource body: ``mimeType`` plus ``text`` or ``data``.

    Text types are returned as decoded text, everything else as base64
    ``data``.  Returns ``None`` if the file cannot be read or is empty.
    """
    try:
        raw = Path(path).read_bytes()
    except OSError:
        return None
    if not raw:
        return None

    mime_type = guess_mime_type(path)
    resource: dict[str, Any] = {"mimeType": mime_type}
    if is_text_mime_type(mime_type):
        resource["text"] = raw.decode("utf-8", errors="replace")
    else:
        resource["data"] = base64.b64encode(raw).decode("ascii")
    return resource
