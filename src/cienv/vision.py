"""
Vision control configurator: vision and brain-wave control packages.

Every operation takes a level ("basic", "advanced", "full", or the
empty/unset sentinel) and branches on it:
    - configure_vision_control: install the level's package set
    - setup_vision_environment: export the level's environment variables
    - verify_vision_control: import-check the level's package set

The sentinel disables all three. Unknown levels are warned about,
never raised.
"""
from __future__ import annotations

from typing import Dict, Optional, Union

from cienv.annotations import Annotator, default_annotator
from cienv.catalog import MIN_DEVICE_CHANNELS, import_names_for, vision_packages_for
from cienv.model import VisionLevel
from cienv.runner import CommandRunner, build_import_check_script, pip_install_args, verify_args


LevelArg = Union[str, VisionLevel, None]

VERIFY_FAILED_MESSAGE = "Some vision control packages could not be verified"


def _level_name(level: LevelArg) -> str:
    if isinstance(level, VisionLevel):
        return level.value
    return level or ""


def _invalid_level_message(level: LevelArg) -> str:
    return (
        f"Invalid vision control level: {_level_name(level)}. "
        f"Supported levels are: {', '.join(VisionLevel.supported())}"
    )


def configure_vision_control(
    level: LevelArg,
    runner: Optional[CommandRunner] = None,
    annotator: Optional[Annotator] = None,
    python: str = "python",
) -> None:
    """Upgrade-install the package set for `level`."""
    annotator = annotator or default_annotator()
    resolved = VisionLevel.parse(level)

    if resolved is VisionLevel.DISABLED:
        annotator.info("Vision control configuration not requested")
        return

    annotator.info(f"Configuring vision control at {_level_name(level)} level...")

    packages = vision_packages_for(resolved) if resolved is not None else None
    if not packages:
        annotator.warning(_invalid_level_message(level))
        return

    runner = runner or CommandRunner()
    annotator.info(f"Installing vision control packages: {', '.join(packages)}")
    result = runner.run(python, pip_install_args(packages))
    if result.ok:
        annotator.info("Successfully configured vision control")
    else:
        annotator.warning(
            f"Failed to install some vision control packages: {result.reason}. Continuing..."
        )


def vision_environment(level: LevelArg) -> Dict[str, str]:
    """
    Environment variables for `level`, in export order.

    Any non-empty level gets the two VISION_CONTROL_* variables, including
    unknown ones. Thread limits apply from "advanced" up; framework and
    EEG device settings only at "full".
    """
    name = _level_name(level)
    if not name:
        return {}

    env = {
        "VISION_CONTROL_ENABLED": "true",
        "VISION_CONTROL_LEVEL": name,
    }

    resolved = VisionLevel.parse(level)
    if resolved in (VisionLevel.ADVANCED, VisionLevel.FULL):
        env["OMP_NUM_THREADS"] = "4"
        env["MKL_NUM_THREADS"] = "4"

    if resolved is VisionLevel.FULL:
        env["TF_CPP_MIN_LOG_LEVEL"] = "2"
        env["PYTORCH_ENABLE_MPS_FALLBACK"] = "1"
        env["MNE_DEVICE_CHANNELS"] = str(MIN_DEVICE_CHANNELS)

    return env


def setup_vision_environment(level: LevelArg, annotator: Optional[Annotator] = None) -> Dict[str, str]:
    """
    Export the environment variables for `level`.

    Returns:
        The variables that were exported (empty for the unset sentinel)
    """
    env = vision_environment(level)
    if not env:
        return env

    annotator = annotator or default_annotator()
    annotator.info("Setting up vision control environment variables...")

    for key, value in env.items():
        annotator.export_variable(key, value)

    if VisionLevel.parse(level) is VisionLevel.FULL:
        annotator.info(
            f"Device configured with minimum {MIN_DEVICE_CHANNELS} channels for EEG processing"
        )

    annotator.info("Vision control environment configured")
    return env


def verify_vision_control(
    level: LevelArg,
    runner: Optional[CommandRunner] = None,
    annotator: Optional[Annotator] = None,
    python: str = "python",
) -> bool:
    """
    Import-check every package of the level's set.

    Returns:
        True when nothing needs verifying or every import succeeded
    """
    resolved = VisionLevel.parse(level)
    if resolved is VisionLevel.DISABLED:
        return True

    annotator = annotator or default_annotator()
    annotator.info("Verifying vision control configuration...")

    packages = vision_packages_for(resolved) if resolved is not None else None
    if not packages:
        annotator.warning(_invalid_level_message(level))
        return False

    runner = runner or CommandRunner()
    script = build_import_check_script(
        import_names_for(packages), "Vision control packages verified successfully"
    )
    result = runner.run(python, verify_args(script))
    if not result.ok:
        annotator.warning(VERIFY_FAILED_MESSAGE)
        return False
    return True
