"""
Package catalog: the static tables every operation reads.

Built once at import time and never mutated. Order matters: lists are
passed to pip exactly as written here.
"""
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

from cienv.model import VisionLevel


# Minimum EEG channel count for device-fidelity configuration
MIN_DEVICE_CHANNELS = 32

RESEARCH_PACKAGES: Tuple[str, ...] = (
    "numpy",
    "pandas",
    "scipy",
    "matplotlib",
    "jupyter",
    "jupyterlab",
    "scikit-learn",
    "seaborn",
)

# Only these are import-checked after installing RESEARCH_PACKAGES
RESEARCH_VERIFY_IMPORTS: Tuple[str, ...] = (
    "numpy",
    "pandas",
    "scipy",
    "matplotlib",
    "jupyter",
)

VISION_PACKAGES: Mapping[VisionLevel, Tuple[str, ...]] = MappingProxyType({
    VisionLevel.BASIC: ("opencv-python", "pillow"),
    VisionLevel.ADVANCED: ("opencv-python", "pillow", "tensorflow", "torch"),
    VisionLevel.FULL: (
        "opencv-python",
        "pillow",
        "tensorflow",
        "torch",
        "torchvision",
        "keras",
        "scikit-image",
        "mne",
        "pyeeg",
    ),
})

# pip distribution name -> runtime import name, where they differ
IMPORT_NAMES: Mapping[str, str] = MappingProxyType({
    "opencv-python": "cv2",
    "pillow": "PIL",
    "scikit-image": "skimage",
})


def import_name_for(package: str) -> str:
    return IMPORT_NAMES.get(package, package)


def import_names_for(packages: Sequence[str]) -> Tuple[str, ...]:
    return tuple(import_name_for(p) for p in packages)


def vision_packages_for(level: VisionLevel) -> Optional[Tuple[str, ...]]:
    """Package list for a level, or None for DISABLED."""
    return VISION_PACKAGES.get(level)
