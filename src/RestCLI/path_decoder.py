"""Resource path splitting and percent-decoding."""

from __future__ import annotations

import re
from urllib.parse import unquote

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class MalformedPathError(Exception):
    """Raised when a resource path cannot be decoded."""

    def __init__(self, path: str, reason: str, segment: str | None = None) -> None:
        self.path = path
        self.reason = reason
        self.segment = segment
        if segment is None:
            super().__init__(f"Malformed path {path!r}: {reason}")
        else:
            super().__init__(
                f"Malformed path {path!r}: {reason} (segment {segment!r})"
            )


def decode_path(raw_path: str) -> list[str]:
    """Split a resource path into percent-decoded segments.

    Examples:
      - /languages/rust            -> ["languages", "rust"]
      - /languages/C%2FC++         -> ["languages", "C/C++"]
      - /languages/go/             -> ["languages", "go"]
    """
    if not raw_path:
        raise MalformedPathError(raw_path, "path is empty")
    if not raw_path.startswith("/"):
        raise MalformedPathError(raw_path, "path must start with '/'")

    # A single trailing slash names the same resource
    body = raw_path[1:]
    if body.endswith("/"):
        body = body[:-1]
    if not body:
        raise MalformedPathError(raw_path, "path has no segments")

    return [_decode_segment(raw_path, chunk) for chunk in body.split("/")]


def _decode_segment(raw_path: str, chunk: str) -> str:
    """Percent-decode a single segment, rejecting bad escapes."""
    if not chunk:
        raise MalformedPathError(raw_path, "empty segment", chunk)
    if "%" not in chunk:
        return chunk
    if _BAD_ESCAPE.search(chunk):
        raise MalformedPathError(raw_path, "invalid percent-encoding", chunk)
    try:
        return unquote(chunk, errors="strict")
    except UnicodeDecodeError as exc:
        raise MalformedPathError(
            raw_path, "percent-encoded bytes are not valid UTF-8", chunk
        ) from exc
