"""
External command execution.

CommandRunner runs one program at a time and reports the outcome as a
CommandResult. It never raises for a failed command: non-zero exits,
spawn failures and timeouts all come back as failed results with a
reason string suitable for a warning.

Output is not captured, so pip and the import checks stream straight
into the job log.
"""
from __future__ import annotations

import json
import logging
import subprocess
from typing import Optional, Sequence

from cienv.model import CommandResult

log = logging.getLogger(__name__)


_IMPORT_CHECK_TEMPLATE = """
import sys
packages = {packages}
failed = []
for pkg in packages:
    try:
        __import__(pkg)
    except ImportError:
        failed.append(pkg)
if failed:
    print(f"Failed to import: {{', '.join(failed)}}")
    sys.exit(1)
else:
    print({success})
    sys.exit(0)
"""


class CommandRunner:
    """
    Runs external commands sequentially.

    Args:
        timeout: Seconds to wait for each command before killing it.
            None waits indefinitely.
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def run(self, program: str, args: Sequence[str]) -> CommandResult:
        cmd = (program, *args)
        log.debug("Running %s", " ".join(cmd))
        try:
            completed = subprocess.run(list(cmd), check=False, timeout=self.timeout)
        except subprocess.TimeoutExpired:
            return CommandResult(
                args=cmd,
                returncode=-1,
                reason=f"The process '{program}' timed out after {self.timeout} seconds",
            )
        except OSError as e:
            return CommandResult(args=cmd, returncode=-1, reason=f"Unable to run '{program}': {e}")

        if completed.returncode != 0:
            return CommandResult(
                args=cmd,
                returncode=completed.returncode,
                reason=f"The process '{program}' failed with exit code {completed.returncode}",
            )
        return CommandResult(args=cmd, returncode=0)


def pip_install_args(packages: Sequence[str]) -> list:
    """Arguments for an upgrade-install of `packages`, in order."""
    return ["-m", "pip", "install", "--upgrade", *packages]


def verify_args(script: str) -> list:
    return ["-c", script]


def build_import_check_script(import_names: Sequence[str], success_message: str) -> str:
    """
    Build the import-check script passed to `<interpreter> -c`.

    The script tries `__import__` on each name, prints the failures and
    exits 1 if any import failed, otherwise prints `success_message` and
    exits 0.

    Args:
        import_names: Runtime import names (not pip distribution names)
        success_message: Line printed when every import succeeds

    Returns:
        Python source text
    """
    return _IMPORT_CHECK_TEMPLATE.format(
        packages=json.dumps(list(import_names)),
        success=json.dumps(success_message),
    )
