from __future__ import annotations

import io
import logging

from rich.console import Console

from chart_version_gate.models.verdict import Failure, Success
from chart_version_gate.output.reporter import (
    WorkflowCommandHandler,
    escape_data,
    report_verdict,
    write_outputs,
)


def _console() -> tuple[Console, io.StringIO]:
    buf = io.StringIO()
    return Console(file=buf, highlight=False, soft_wrap=True, emoji=False, color_system=None), buf


def test_escape_data():
    assert escape_data("50% done\r\nnext") == "50%25 done%0D%0Anext"


def test_failure_reports_single_error():
    out, buf = _console()
    assert report_verdict(Failure("Chart version has not been updated!"), out) == 1
    assert buf.getvalue() == "::error::Chart version has not been updated!\n"


def test_success_with_old_version():
    out, buf = _console()
    assert report_verdict(Success("1.3.0", "1.2.0"), out) == 0
    assert buf.getvalue().splitlines() == [
        "Old chart version: 1.2.0",
        "New chart version: 1.3.0",
        "New chart version verified successfully.",
    ]


def test_success_new_chart_omits_old_version():
    out, buf = _console()
    report_verdict(Success("1.0.0"), out)
    assert "Old chart version" not in buf.getvalue()


def test_handler_renders_warning_as_command():
    out, buf = _console()
    logger = logging.getLogger("chart_version_gate.test_handler")
    logger.setLevel(logging.DEBUG)
    handler = WorkflowCommandHandler(out=out)
    logger.addHandler(handler)
    try:
        logger.warning("Could not find %s", "Chart.yaml")
        logger.info("plain line")
        logger.debug("hidden")
    finally:
        logger.removeHandler(handler)
    assert buf.getvalue().splitlines() == ["::warning::Could not find Chart.yaml", "plain line"]


def test_write_outputs(tmp_path):
    target = tmp_path / "output"
    write_outputs(Success("1.3.0", "1.2.0"), target)
    write_outputs(Success("0.1.0"), None)
    assert target.read_text(encoding="utf-8") == "new-version=1.3.0\nold-version=1.2.0\n"
