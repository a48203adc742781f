"""rle-regions package.

Discrete 2-D regions as run-length encoded, sorted lists of runs.
"""

from .version import __version__
from .interval import Interval
from .run import Run
from .region import Bounds, Region, complement
from .contracts import ContractViolation, PreconditionViolation, RegionError

__all__ = [
    "__version__",
    "Interval",
    "Run",
    "Region",
    "Bounds",
    "complement",
    "RegionError",
    "PreconditionViolation",
    "ContractViolation",
]
