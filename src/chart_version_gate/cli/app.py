"""Root Typer application."""

from __future__ import annotations

import logging

import typer

from chart_version_gate.cli.options import BaseOption, ChartOption, TokenOption, VerboseOption, WorkspaceOption
from chart_version_gate.config.settings import load_context, settings
from chart_version_gate.core.github_client import GitHubClient
from chart_version_gate.core.version_gate import verify_chart_version
from chart_version_gate.models.action import ActionInputs
from chart_version_gate.models.verdict import Failure, Success, Verdict
from chart_version_gate.output.reporter import configure_logging, report_verdict, write_outputs

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="verify-chart-version",
    help="Verify that a pull request bumps the version of a Helm chart.",
    add_completion=False,
)


def run(inputs: ActionInputs, workspace: str = ".") -> Verdict:
    """Run the gate with the runner context, converting any error into a Failure."""
    try:
        context = load_context()
        github = GitHubClient(token=inputs.token)
        return verify_chart_version(inputs, context, github, workspace=workspace)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        return Failure(f"verify-chart-version failed: {e}")


@app.command()
def verify(
    chart: str = ChartOption,
    token: str = TokenOption,
    base: str = BaseOption,
    workspace: str = WorkspaceOption,
    verbose: bool = VerboseOption,
) -> None:
    """Fail unless the chart version is newer than the one on the base ref."""
    configure_logging(verbose=verbose)
    inputs = ActionInputs(token=token.strip(), chart=chart.strip(), base=base.strip())
    verdict = run(inputs, workspace=workspace)
    if isinstance(verdict, Success):
        try:
            write_outputs(verdict, settings.output_file)
        except OSError as e:
            logger.debug("Writing step outputs failed", exc_info=True)
            verdict = Failure(f"verify-chart-version failed: could not write step outputs: {e}")
    code = report_verdict(verdict)
    if code:
        raise typer.Exit(code=code)


def main() -> None:
    app()
