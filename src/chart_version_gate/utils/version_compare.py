"""Semver comparison utilities."""

from __future__ import annotations

import semver


def _clean(v: str) -> str:
    """Trim whitespace and a single leading 'v', as strict node-semver does."""
    v = v.strip()
    if v.startswith("v"):
        v = v[1:]
    return v


def parse_version(v: str) -> semver.Version | None:
    """Parse a version string, returning None on failure."""
    try:
        return semver.Version.parse(_clean(v))
    except (ValueError, TypeError):
        return None


def is_valid(v: str) -> bool:
    return parse_version(v) is not None


def is_newer(current: str, candidate: str) -> bool:
    """Return True if candidate is strictly greater than current.

    Raises ValueError when either side is not a valid version.
    """
    cur = parse_version(current)
    if cur is None:
        raise ValueError(f"Invalid Version: {current}")
    cand = parse_version(candidate)
    if cand is None:
        raise ValueError(f"Invalid Version: {candidate}")
    return cand > cur
