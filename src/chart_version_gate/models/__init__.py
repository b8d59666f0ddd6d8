"""Data models for the chart version gate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class InlineContent:
    """A file returned by the contents API with its body inlined."""

    text: str


@dataclass(frozen=True)
class NotInline:
    """A contents API response without an inline body (dir, symlink, large file)."""

    kind: str = ""


RemoteContent = Union[InlineContent, NotInline]
