"""Verdict models: the single outcome of a gate run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Success:
    new_version: str
    old_version: str | None = None


@dataclass(frozen=True)
class Failure:
    reason: str


Verdict = Union[Success, Failure]
