from __future__ import annotations

from pathlib import Path

import pytest

from chart_version_gate.core.github_client import GitHubError
from chart_version_gate.models import InlineContent, NotInline
from chart_version_gate.models.action import ActionContext, ActionInputs

RUNNER_ENV = (
    "GITHUB_EVENT_NAME",
    "GITHUB_EVENT_PATH",
    "GITHUB_REPOSITORY",
    "GITHUB_OUTPUT",
    "GITHUB_WORKSPACE",
    "INPUT_TOKEN",
    "INPUT_CHART",
    "INPUT_BASE",
)


class FakeGitHub:
    """Records calls and serves canned refs/contents."""

    def __init__(self, refs=(), contents=None, default_branch="main"):
        self.refs = set(refs)
        self.contents = contents or {}
        self.default_branch = default_branch
        self.calls: list[tuple] = []

    def get_ref(self, owner, repo, ref):
        self.calls.append(("get_ref", owner, repo, ref))
        if ref not in self.refs:
            raise GitHubError("404 Not Found", status=404)
        return {"ref": f"refs/{ref}"}

    def get_content(self, owner, repo, path, ref):
        self.calls.append(("get_content", owner, repo, path, ref))
        content = self.contents.get((path, ref))
        if content is None:
            raise GitHubError("404 Not Found", status=404)
        if isinstance(content, NotInline):
            return content
        return InlineContent(text=content)

    def get_default_branch(self, owner, repo):
        self.calls.append(("get_default_branch", owner, repo))
        return self.default_branch


@pytest.fixture(autouse=True)
def _clean_runner_env(monkeypatch):
    for name in RUNNER_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def workspace(tmp_path: Path) -> Path:
    return tmp_path


@pytest.fixture()
def write_chart(workspace: Path):
    def _write(body: str, chart: str = "charts/app") -> str:
        folder = workspace / chart
        folder.mkdir(parents=True, exist_ok=True)
        (folder / "Chart.yaml").write_text(body, encoding="utf-8")
        return chart
    return _write


@pytest.fixture()
def pr_context() -> ActionContext:
    return ActionContext(event_name="pull_request", owner="acme", repo="charts", default_branch="main")


@pytest.fixture()
def inputs() -> ActionInputs:
    return ActionInputs(token="t0ken", chart="charts/app")
