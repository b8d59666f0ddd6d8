"""Render log records and verdicts for the Actions runner."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console

from chart_version_gate.models.verdict import Failure, Success, Verdict

console = Console(highlight=False, soft_wrap=True, emoji=False)

_COMMANDS: dict[int, str] = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


def escape_data(value: str) -> str:
    """Escape a workflow command message as the runner expects."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def workflow_command(command: str, message: str) -> str:
    return f"::{command}::{escape_data(message)}"


class WorkflowCommandHandler(logging.Handler):
    """Logging handler that turns records into ``::warning::``-style commands.

    INFO records are printed as plain lines.
    """

    def __init__(self, out: Console | None = None, level: int = logging.INFO):
        super().__init__(level=level)
        self.out = out or console

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            command = _COMMANDS.get(record.levelno)
            if command is None:
                self.out.print(message, markup=False)
            else:
                self.out.print(workflow_command(command, message), markup=False)
        except Exception:
            self.handleError(record)


def configure_logging(verbose: bool = False, out: Console | None = None) -> None:
    root = logging.getLogger("chart_version_gate")
    for handler in list(root.handlers):
        if isinstance(handler, WorkflowCommandHandler):
            root.removeHandler(handler)
    level = logging.DEBUG if verbose else logging.INFO
    root.addHandler(WorkflowCommandHandler(out=out, level=level))
    root.setLevel(level)


def write_outputs(verdict: Success, output_file: Path | None) -> None:
    """Append step outputs to the runner's GITHUB_OUTPUT file."""
    if output_file is None:
        return
    with output_file.open("a", encoding="utf-8") as fh:
        fh.write(f"new-version={verdict.new_version}\n")
        fh.write(f"old-version={verdict.old_version or ''}\n")


def report_verdict(verdict: Verdict, out: Console | None = None) -> int:
    """Print the verdict and return the process exit code."""
    out = out or console
    if isinstance(verdict, Failure):
        out.print(workflow_command("error", verdict.reason), markup=False)
        return 1
    if verdict.old_version is not None:
        out.print(f"Old chart version: {verdict.old_version}", markup=False)
    out.print(f"New chart version: {verdict.new_version}", markup=False)
    out.print("[green]New chart version verified successfully.[/green]")
    return 0
