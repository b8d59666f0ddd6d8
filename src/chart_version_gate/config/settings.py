"""Application configuration and runner context."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

from chart_version_gate.models.action import ActionContext


def _default_api_url() -> str:
    """Return the REST API root, honouring GitHub Enterprise runners."""
    return os.environ.get("GITHUB_API_URL", "") or "https://api.github.com"


def _default_output_file() -> Path | None:
    output = os.environ.get("GITHUB_OUTPUT", "")
    if output:
        return Path(output)
    return None


@dataclass
class Settings:
    api_url: str = field(default_factory=_default_api_url)
    output_file: Path | None = field(default_factory=_default_output_file)
    request_timeout: float = 30
    user_agent: str = "chart-version-gate"
    api_version: str = "2022-11-28"


# Global singleton
settings = Settings()


def _load_event_payload(event_path: str) -> dict:
    if not event_path:
        return {}
    path = Path(event_path)
    if not path.exists():
        return {}
    data = json.loads(path.read_text(encoding="utf-8"))
    return data if isinstance(data, dict) else {}


def load_context() -> ActionContext:
    """Build the run context from the variables the Actions runner exports.

    The default branch comes from the event payload; it is left empty when
    the payload does not carry one.
    """
    owner, _, repo = os.environ.get("GITHUB_REPOSITORY", "").partition("/")
    payload = _load_event_payload(os.environ.get("GITHUB_EVENT_PATH", ""))
    repository = payload.get("repository") or {}
    return ActionContext(
        event_name=os.environ.get("GITHUB_EVENT_NAME", ""),
        owner=owner,
        repo=repo,
        default_branch=repository.get("default_branch") or "",
    )
