"""Run inputs and runner context."""

from __future__ import annotations

from dataclasses import dataclass

PULL_REQUEST_EVENT = "pull_request"


@dataclass(frozen=True)
class ActionInputs:
    token: str = ""
    chart: str = ""
    base: str = ""

    @property
    def chart_yaml_path(self) -> str:
        return f"{self.chart}/Chart.yaml"


@dataclass(frozen=True)
class ActionContext:
    event_name: str = ""
    owner: str = ""
    repo: str = ""
    default_branch: str = ""

    @property
    def is_pull_request(self) -> bool:
        return self.event_name == PULL_REQUEST_EVENT
