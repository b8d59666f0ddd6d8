"""Base64 helpers for GitHub contents API payloads."""

from __future__ import annotations

import base64


def decode_content(data: str, encoding: str = "base64") -> str:
    """Decode the ``content`` field of a contents API response.

    GitHub wraps the base64 body at 60 columns, so embedded newlines are
    stripped before decoding.  Anything not marked as base64 is returned
    unchanged.  Invalid UTF-8 is replaced rather than rejected.
    """
    if encoding != "base64":
        return data
    joined = "".join(data.split())
    return base64.b64decode(joined).decode("utf-8", errors="replace")


def encode_content(text: str) -> str:
    """Encode text the way the contents API does (for tests)."""
    raw = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return "\n".join(raw[i:i + 60] for i in range(0, len(raw), 60)) + "\n"
