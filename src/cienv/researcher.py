"""
Researcher tools: the general data-science package set.

Installing and verifying are both best-effort. Neither function raises.
"""
from typing import Optional

from cienv.annotations import Annotator, default_annotator
from cienv.catalog import RESEARCH_PACKAGES, RESEARCH_VERIFY_IMPORTS
from cienv.runner import CommandRunner, build_import_check_script, pip_install_args, verify_args


VERIFY_FAILED_MESSAGE = "Some researcher tools could not be verified"


def install_researcher_tools(
    runner: Optional[CommandRunner] = None,
    annotator: Optional[Annotator] = None,
    python: str = "python",
) -> None:
    """Upgrade-install every package in RESEARCH_PACKAGES."""
    runner = runner or CommandRunner()
    annotator = annotator or default_annotator()

    annotator.info("Installing researcher tools and packages...")
    annotator.info(f"Installing packages: {', '.join(RESEARCH_PACKAGES)}")

    result = runner.run(python, pip_install_args(RESEARCH_PACKAGES))
    if result.ok:
        annotator.info("Successfully installed researcher tools")
    else:
        annotator.warning(f"Failed to install some researcher tools: {result.reason}. Continuing...")


def verify_researcher_tools(
    runner: Optional[CommandRunner] = None,
    annotator: Optional[Annotator] = None,
    python: str = "python",
) -> bool:
    """
    Import-check the core researcher packages.

    Only RESEARCH_VERIFY_IMPORTS is checked, not the full install list.

    Returns:
        True if every import succeeded, False otherwise
    """
    runner = runner or CommandRunner()
    annotator = annotator or default_annotator()

    annotator.info("Verifying researcher tools installation...")
    script = build_import_check_script(
        RESEARCH_VERIFY_IMPORTS, "All researcher tools verified successfully"
    )
    result = runner.run(python, verify_args(script))
    if not result.ok:
        annotator.warning(VERIFY_FAILED_MESSAGE)
        return False
    return True
