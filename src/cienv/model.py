"""
Core Model Objects

Defines the data structures shared by the installers, the pipeline and the CLI:
    - VisionLevel (which vision package set and environment apply)
    - CommandResult (outcome of one external command)
    - RunConfig (what a pipeline run should do)
    - RunReport (what a pipeline run did)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about subprocesses or logging
        - Are plain data, mostly immutable
        - Are fully serializable
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union


class VisionLevel(Enum):
    """
    Vision control configuration levels.

    DISABLED is the empty/unset sentinel meaning "feature not requested".
    It is a member so callers can pass the raw input value straight through.
    """

    DISABLED = ""
    BASIC = "basic"
    ADVANCED = "advanced"
    FULL = "full"

    @classmethod
    def parse(cls, value: Union[str, "VisionLevel", None]) -> Optional["VisionLevel"]:
        """
        Resolve a raw level value.

        Args:
            value: Level name, VisionLevel member, or None

        Returns:
            The matching member, DISABLED for None/"", or None if unknown
        """
        if isinstance(value, cls):
            return value
        if not value:
            return cls.DISABLED
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def supported(cls) -> List[str]:
        """Names of the levels that select a package set."""
        return [level.value for level in cls if level is not cls.DISABLED]


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of a single external command invocation.

    The runner never raises for a failed command. Failure is carried here
    and the caller decides how to report it.

    Properties:
        args:
            Full command line (program first)

        returncode:
            Process exit status, or -1 when the process could not be
            started or was killed on timeout

        reason:
            Human-readable failure description (empty on success)
    """

    args: Tuple[str, ...]
    returncode: int
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass
class RunConfig:
    """
    Settings for one pipeline run.

    Properties:
        researcher_tools: Install (and verify) the researcher package list
        vision_control_level: Raw level string ("" disables vision control)
        python: Interpreter used for pip and import checks
        timeout: Per-command timeout in seconds (None waits forever)
        verify: Run the import checks after installing
    """

    researcher_tools: bool = False
    vision_control_level: str = ""
    python: str = "python"
    timeout: Optional[float] = None
    verify: bool = True


@dataclass
class RunReport:
    """
    What a pipeline run did.

    researcher_verified / vision_verified are None when the
    corresponding verification step did not run.
    """

    researcher_verified: Optional[bool] = None
    vision_verified: Optional[bool] = None
    exported: Dict[str, str] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.warnings and self.researcher_verified is not False and self.vision_verified is not False
