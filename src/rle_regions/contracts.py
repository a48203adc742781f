"""Error taxonomy and run-list contract checks.

Hard-fail policy
----------------
All failures in this package are programming errors, not runtime conditions.
Nothing retries and nothing is swallowed.

- :class:`PreconditionViolation` is always raised: bounds of complement or
  empty regions, complement structuring elements, negative gap tolerances.
- :class:`ContractViolation` is raised for unsorted or unpacked run lists, but
  only when strict checking is enabled (``contracts.strict`` in the config,
  or env ``RLE_REGIONS_STRICT``). The free functions of
  :mod:`rle_regions.runs` never check; region-level operations do.
"""

from __future__ import annotations

from typing import Sequence

from rle_regions.run import Run
from rle_regions.runs import is_packed, is_sorted


class RegionError(RuntimeError):
    """Base class for all region errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = str(code)
        self.message = str(message)
        super().__init__(f"{self.code}: {self.message}")


class PreconditionViolation(RegionError, ValueError):
    """An operation was called with arguments it is not defined for."""


class ContractViolation(RegionError):
    """A run list breaks the sorted/packed invariant."""


def _strict() -> bool:
    # Late import: config depends on pydantic/yaml, keep the value types light.
    from rle_regions.config import current_config

    return bool(current_config().contracts.strict)


def require_sorted(runs: Sequence[Run], *, where: str) -> None:
    if _strict() and not is_sorted(runs):
        raise ContractViolation("RUNS_UNSORTED", f"{where}: runs are not sorted")


def require_packed(runs: Sequence[Run], *, where: str) -> None:
    """Require sorted *and* packed runs (packing implies sortedness)."""
    if not _strict():
        return
    if not is_sorted(runs):
        raise ContractViolation("RUNS_UNSORTED", f"{where}: runs are not sorted")
    if not is_packed(runs):
        raise ContractViolation("RUNS_UNPACKED", f"{where}: runs are not packed")


def require_finite(region, *, what: str) -> None:
    """Require a plain (non-complement) region."""
    if region.complement:
        raise PreconditionViolation(
            "COMPLEMENT_REGION",
            f"cannot calculate {what} for infinite (complement) regions",
        )


def require_non_empty(region, *, what: str) -> None:
    if not region.runs:
        raise PreconditionViolation("EMPTY_REGION", f"cannot calculate {what} for empty regions")


def require_structuring_element(element, *, what: str) -> None:
    if element.complement:
        raise PreconditionViolation(
            "COMPLEMENT_STRUCTURING_ELEMENT",
            f"cannot calculate {what} with infinite (complement) structuring elements",
        )


def require_gap(name: str, value: int) -> None:
    if int(value) < 0:
        raise PreconditionViolation("NEGATIVE_GAP", f"{name} must be >= 0, got {value}")
