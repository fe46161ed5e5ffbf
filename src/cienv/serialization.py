"""
Serialization helpers for the package matrix and run reports.

JSON output uses sorted keys so it is stable across runs; YAML output
keeps the catalog order, which is the order pip receives packages in.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from cienv.catalog import (
    IMPORT_NAMES,
    MIN_DEVICE_CHANNELS,
    RESEARCH_PACKAGES,
    RESEARCH_VERIFY_IMPORTS,
    VISION_PACKAGES,
)
from cienv.model import RunReport
from cienv.vision import vision_environment


def matrix_to_dict() -> Dict[str, Any]:
    return {
        "researcher": {
            "packages": list(RESEARCH_PACKAGES),
            "verify_imports": list(RESEARCH_VERIFY_IMPORTS),
        },
        "vision": {
            level.value: {
                "packages": list(packages),
                "environment": vision_environment(level),
            }
            for level, packages in VISION_PACKAGES.items()
        },
        "import_names": dict(IMPORT_NAMES),
        "min_device_channels": MIN_DEVICE_CHANNELS,
    }


def matrix_to_json() -> str:
    return json.dumps(matrix_to_dict(), sort_keys=True, indent=2)


def matrix_to_yaml() -> str:
    return yaml.safe_dump(matrix_to_dict(), sort_keys=False)


def report_to_dict(report: RunReport) -> Dict[str, Any]:
    return {
        "ok": report.ok,
        "researcher_verified": report.researcher_verified,
        "vision_verified": report.vision_verified,
        "exported": dict(report.exported),
        "warnings": list(report.warnings),
    }


def report_to_json(report: RunReport) -> str:
    return json.dumps(report_to_dict(report), sort_keys=True, indent=2)
