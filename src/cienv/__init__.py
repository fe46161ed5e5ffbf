"""
CI Environment Helper (cienv) Package

Installs and verifies predefined sets of data-science and vision/ML
packages for CI pipelines, and exports the configuration environment
variables later pipeline steps rely on.

OPERATING GUARANTEE:
--------------------
Nothing in this package fails the pipeline.
    - Install failures are reported as warnings
    - Verify failures return False and warn
    - Invalid levels are warned about and skipped

Package installation is a best-effort enhancement, not a required step.
"""

__version__ = "0.1.0"
