"""
Logging and pipeline annotation.

The Annotator is the only way operations talk to the outside world
besides running commands:
    - info: informational progress
    - warning: non-fatal problem (there is no error level)
    - export_variable: environment variable visible to later steps

Under GitHub Actions, warnings are also emitted as `::warning::`
workflow commands and exported variables are appended to the file
named by GITHUB_ENV.
"""
from __future__ import annotations

import logging
import os
import uuid
from typing import MutableMapping, Optional


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class Annotator:
    """
    Routes messages to logging and exports variables to the pipeline.

    Args:
        logger: Logger to write to (defaults to the package logger)
        environ: Environment mapping to export into (defaults to os.environ)
        workflow_commands: Emit GitHub workflow commands for warnings.
            Defaults to True when GITHUB_ACTIONS == "true".
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        environ: Optional[MutableMapping[str, str]] = None,
        workflow_commands: Optional[bool] = None,
    ):
        self.logger = logger or logging.getLogger("cienv")
        self.environ = os.environ if environ is None else environ
        if workflow_commands is None:
            workflow_commands = self.environ.get("GITHUB_ACTIONS") == "true"
        self.workflow_commands = workflow_commands

    def info(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)
        if self.workflow_commands:
            print(f"::warning::{_escape_data(message)}", flush=True)

    def export_variable(self, key: str, value: str) -> None:
        """
        Set `key` for this process and, under Actions, for later steps.

        Later steps read GITHUB_ENV, which uses a heredoc block per
        variable so values may contain newlines.
        """
        value = str(value)
        self.environ[key] = value
        env_file = self.environ.get("GITHUB_ENV")
        if env_file:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            with open(env_file, "a", encoding="utf-8") as fh:
                fh.write(f"{key}<<{delimiter}\n{value}\n{delimiter}\n")
        self.logger.debug("Exported %s=%s", key, value)


_default: Optional[Annotator] = None


def default_annotator() -> Annotator:
    """Process-wide annotator used when an operation is not given one."""
    global _default
    if _default is None:
        _default = Annotator()
    return _default
