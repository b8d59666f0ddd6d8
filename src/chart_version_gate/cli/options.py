"""Shared CLI options, each bound to the variable the Actions runner sets."""

from __future__ import annotations

import typer

TokenOption = typer.Option("", "--token", envvar="INPUT_TOKEN", help="GitHub token for API calls")
ChartOption = typer.Option(..., "--chart", envvar="INPUT_CHART", help="Path to the Helm chart folder")
BaseOption = typer.Option("", "--base", envvar="INPUT_BASE", help="Ref to compare against (default: repository default branch)")
WorkspaceOption = typer.Option(".", "--workspace", envvar="GITHUB_WORKSPACE", help="Root of the checked-out repository")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Emit debug output")
