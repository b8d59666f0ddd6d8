"""Verify that a pull request bumped its Helm chart version."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, Union

import yaml

from chart_version_gate.models import InlineContent, RemoteContent
from chart_version_gate.models.action import ActionContext, ActionInputs
from chart_version_gate.models.chart import ChartMetadata
from chart_version_gate.models.verdict import Failure, Success, Verdict
from chart_version_gate.core.github_client import GitHubError
from chart_version_gate.utils.version_compare import is_newer, is_valid

logger = logging.getLogger(__name__)


class RepositoryApi(Protocol):
    def get_ref(self, owner: str, repo: str, ref: str) -> dict: ...

    def get_content(self, owner: str, repo: str, path: str, ref: str) -> RemoteContent: ...

    def get_default_branch(self, owner: str, repo: str) -> str: ...


def verify_chart_version(
    inputs: ActionInputs,
    context: ActionContext,
    github: RepositoryApi,
    workspace: str | Path = ".",
) -> Verdict:
    """Run every check in order and return the first failure or the success.

    Only a failed fetch of the original Chart.yaml is tolerated; the chart is
    then treated as new and no comparison is made.
    """
    if not context.is_pull_request:
        return Failure("This action can only run on pull requests!")

    chart_yaml = Path(workspace) / inputs.chart_yaml_path
    if not chart_yaml.exists():
        return Failure(f"{inputs.chart} is not a valid Helm chart folder!")

    if inputs.base:
        failure = _check_base_ref(inputs, context, github)
        if failure is not None:
            return failure

    original_version = _fetch_original_version(inputs, context, github)

    updated = _read_updated_version(inputs, chart_yaml)
    if isinstance(updated, Failure):
        return updated

    return _compare(updated, original_version)


def _check_base_ref(
    inputs: ActionInputs, context: ActionContext, github: RepositoryApi,
) -> Failure | None:
    try:
        github.get_ref(context.owner, context.repo, inputs.base)
    except GitHubError:
        logger.debug("Ref lookup for %s failed", inputs.base, exc_info=True)
        return Failure(f"Ref {inputs.base} was not found for this repository!")
    return None


def _original_ref(inputs: ActionInputs, context: ActionContext, github: RepositoryApi) -> str:
    if inputs.base:
        return inputs.base
    default_branch = context.default_branch
    if not default_branch:
        default_branch = github.get_default_branch(context.owner, context.repo)
    return f"heads/{default_branch}"


def _fetch_original_version(
    inputs: ActionInputs, context: ActionContext, github: RepositoryApi,
) -> str | None:
    """Return the version declared at the base ref, or None for a new chart."""
    try:
        ref = _original_ref(inputs, context, github)
        content = github.get_content(context.owner, context.repo, inputs.chart_yaml_path, ref)
    except GitHubError:
        logger.debug("Original Chart.yaml fetch failed", exc_info=True)
        logger.warning(
            "Could not find original Chart.yaml for %s, assuming this is a new chart.",
            inputs.chart,
        )
        return None

    if not isinstance(content, InlineContent):
        logger.debug("Original Chart.yaml has no inline content (%s)", content.kind)
        return None

    original = ChartMetadata.from_dict(yaml.safe_load(content.text))
    return original.version or None


def _read_updated_version(inputs: ActionInputs, chart_yaml: Path) -> Union[str, Failure]:
    text = chart_yaml.read_text(encoding="utf-8", errors="replace")
    updated = ChartMetadata.from_dict(yaml.safe_load(text))
    if not updated.has_version:
        return Failure(f"{inputs.chart_yaml_path} does not contain a version!")
    if not is_valid(updated.version):
        return Failure(f"{updated.version} is not a valid SemVer version!")
    return updated.version


def _compare(updated: str, original: str | None) -> Verdict:
    if original is None:
        return Success(new_version=updated)
    # Literal comparison: "v1.0.0" and "1.0.0" are different strings here.
    if updated == original:
        return Failure("Chart version has not been updated!")
    if not is_newer(original, updated):
        return Failure(f"Updated chart version {updated} is < {original}!")
    return Success(new_version=updated, old_version=original)
