"""Shared fakes for the command runner and annotator."""

import pytest

from cienv.annotations import Annotator
from cienv.model import CommandResult


class FakeRunner:
    """Records every command and answers with a fixed exit code."""

    def __init__(self, returncode=0, reason="boom"):
        self.returncode = returncode
        self.reason = reason
        self.calls = []

    def run(self, program, args):
        self.calls.append((program, list(args)))
        cmd = (program, *args)
        if self.returncode == 0:
            return CommandResult(args=cmd, returncode=0)
        return CommandResult(args=cmd, returncode=self.returncode, reason=self.reason)


class RecordingAnnotator(Annotator):
    """Annotator that keeps its messages and exports in memory."""

    def __init__(self):
        super().__init__(environ={}, workflow_commands=False)
        self.infos = []
        self.warnings = []

    def info(self, message):
        self.infos.append(message)
        super().info(message)

    def warning(self, message):
        self.warnings.append(message)
        super().warning(message)


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def failing_runner():
    return FakeRunner(returncode=1, reason="Installation failed")


@pytest.fixture
def annotator():
    return RecordingAnnotator()
