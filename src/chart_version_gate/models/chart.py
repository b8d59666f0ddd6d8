"""Chart metadata models."""

from __future__ import annotations

from dataclasses import dataclass


def _scalar(value) -> str:
    # Non-string scalars (`version: 1.0` loads as a float) are stringified.
    if value is None:
        return ""
    return str(value)


@dataclass
class ChartMetadata:
    version: str = ""

    @property
    def has_version(self) -> bool:
        return bool(self.version)

    @classmethod
    def from_dict(cls, d: dict | None) -> ChartMetadata:
        if not d or not isinstance(d, dict):
            return cls()
        return cls(version=_scalar(d.get("version")))
