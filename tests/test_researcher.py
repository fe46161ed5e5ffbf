"""
Tests for the researcher tools installer and verifier.

Commands are never executed: a FakeRunner records what would have run.

These tests verify:
    - The install command and package order
    - Progress and failure messages
    - The verification subset and its result
"""

from cienv.catalog import RESEARCH_PACKAGES
from cienv.researcher import install_researcher_tools, verify_researcher_tools


EXPECTED_INSTALL = [
    "-m", "pip", "install", "--upgrade",
    "numpy", "pandas", "scipy", "matplotlib",
    "jupyter", "jupyterlab", "scikit-learn", "seaborn",
]


class TestInstallResearcherTools:
    """Test install_researcher_tools."""

    def test_installs_all_packages_in_order(self, runner, annotator):
        """Should upgrade-install all eight packages in catalog order."""
        install_researcher_tools(runner, annotator)

        assert runner.calls == [("python", EXPECTED_INSTALL)]
        assert "Installing researcher tools and packages..." in annotator.infos
        assert "Successfully installed researcher tools" in annotator.infos
        assert annotator.warnings == []

    def test_lists_packages_before_installing(self, runner, annotator):
        """Should announce the package list."""
        install_researcher_tools(runner, annotator)
        assert f"Installing packages: {', '.join(RESEARCH_PACKAGES)}" in annotator.infos

    def test_failure_warns_and_continues(self, failing_runner, annotator):
        """Should warn with the failure reason instead of raising."""
        install_researcher_tools(failing_runner, annotator)

        assert len(failing_runner.calls) == 1
        assert len(annotator.warnings) == 1
        assert "Failed to install some researcher tools" in annotator.warnings[0]
        assert "Installation failed" in annotator.warnings[0]
        assert "Successfully installed researcher tools" not in annotator.infos

    def test_custom_interpreter(self, runner, annotator):
        """Should run pip through the given interpreter."""
        install_researcher_tools(runner, annotator, python="/opt/py/bin/python3")
        assert runner.calls[0][0] == "/opt/py/bin/python3"


class TestVerifyResearcherTools:
    """Test verify_researcher_tools."""

    def test_success(self, runner, annotator):
        """Should return True when the import check exits 0."""
        assert verify_researcher_tools(runner, annotator) is True

        program, args = runner.calls[0]
        assert program == "python"
        assert args[0] == "-c"
        assert "import sys" in args[1]
        assert annotator.warnings == []

    def test_checks_only_core_subset(self, runner, annotator):
        """Should import-check five of the eight installed packages."""
        verify_researcher_tools(runner, annotator)
        script = runner.calls[0][1][1]

        assert '["numpy", "pandas", "scipy", "matplotlib", "jupyter"]' in script
        assert "seaborn" not in script
        assert "jupyterlab" not in script

    def test_failure_returns_false_with_one_warning(self, failing_runner, annotator):
        """Should return False and warn exactly once."""
        assert verify_researcher_tools(failing_runner, annotator) is False
        assert annotator.warnings == ["Some researcher tools could not be verified"]
