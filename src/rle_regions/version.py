"""Version helpers.

``__version__`` is the Python package version (PEP 440), kept in sync with
``pyproject.toml``.
"""

from __future__ import annotations

from dataclasses import dataclass
import platform
import sys

import numpy as np


__version__ = "0.4.1"


@dataclass(frozen=True)
class VersionInfo:
    package_version: str
    python: str
    numpy: str
    platform: str


def get_version_info() -> VersionInfo:
    return VersionInfo(
        package_version=__version__,
        python=sys.version.split()[0],
        numpy=str(np.__version__),
        platform=f"{platform.system()} {platform.release()} ({platform.machine()})",
    )
