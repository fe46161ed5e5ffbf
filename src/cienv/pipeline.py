"""
Pipeline orchestration.

Runs the steps in the fixed order a CI job expects:
    1. Researcher tools: install, then verify
    2. Vision control: install, export environment, then verify

One external command at a time. Steps never abort the run; their
warnings are collected into the RunReport.
"""
from __future__ import annotations

import logging
from typing import Optional

from cienv.annotations import Annotator, default_annotator
from cienv.model import RunConfig, RunReport, VisionLevel
from cienv.researcher import install_researcher_tools, verify_researcher_tools
from cienv.runner import CommandRunner
from cienv.vision import configure_vision_control, setup_vision_environment, verify_vision_control

log = logging.getLogger(__name__)


class _ReportingAnnotator(Annotator):
    """Forwards to an Annotator and records warnings into a report."""

    def __init__(self, inner: Annotator, report: RunReport):
        super().__init__(
            logger=inner.logger,
            environ=inner.environ,
            workflow_commands=inner.workflow_commands,
        )
        self._inner = inner
        self._report = report

    def info(self, message: str) -> None:
        self._inner.info(message)

    def warning(self, message: str) -> None:
        self._report.warnings.append(message)
        self._inner.warning(message)

    def export_variable(self, key: str, value: str) -> None:
        self._inner.export_variable(key, value)


def run_pipeline(
    config: RunConfig,
    runner: Optional[CommandRunner] = None,
    annotator: Optional[Annotator] = None,
) -> RunReport:
    runner = runner or CommandRunner(timeout=config.timeout)
    report = RunReport()
    notes = _ReportingAnnotator(annotator or default_annotator(), report)
    python = config.python

    if config.researcher_tools:
        install_researcher_tools(runner, notes, python=python)
        if config.verify:
            report.researcher_verified = verify_researcher_tools(runner, notes, python=python)
    else:
        log.debug("Researcher tools not requested")

    level = config.vision_control_level
    configure_vision_control(level, runner, notes, python=python)
    report.exported.update(setup_vision_environment(level, notes))
    if config.verify and VisionLevel.parse(level) is not VisionLevel.DISABLED:
        report.vision_verified = verify_vision_control(level, runner, notes, python=python)

    return report
