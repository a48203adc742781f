"""Pydantic schema for the rle-regions config file.

Notes
-----
- Blocks allow no extra keys at the pydantic level so typos surface as
  validation errors; `find_unknown_keys()` reports them in a friendlier form.
- `schema_validate()` returns a small report object (ok/errors/warnings).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------- report objects ----------------------------


@dataclass(frozen=True)
class SchemaIssue:
    code: str
    message: str
    hint: str = ""


@dataclass(frozen=True)
class SchemaReport:
    ok: bool
    errors: List[SchemaIssue]
    warnings: List[SchemaIssue]


# ------------------------------ pydantic ------------------------------


class ContractsBlock(BaseModel):
    """Run-list contract checking.

    strict: check sortedness/packing of operands in region-level operations
    and raise :class:`rle_regions.contracts.ContractViolation` on failure.
    """

    model_config = ConfigDict(extra="forbid")

    strict: bool = True


class LabelingBlock(BaseModel):
    """Default gap tolerances for connected-component labeling.

    dx=1, dy=1 connects runs whose columns touch in neighbouring rows
    (8-connectivity); dx=0 gives 4-connectivity.
    """

    model_config = ConfigDict(extra="forbid")

    dx: int = Field(default=1, ge=0)
    dy: int = Field(default=1, ge=0)


class ImagingBlock(BaseModel):
    """Defaults for region -> image conversion."""

    model_config = ConfigDict(extra="forbid")

    dtype: str = "uint8"
    background: int = 0

    @field_validator("dtype")
    @classmethod
    def _known_dtype(cls, v: str) -> str:
        import numpy as np

        try:
            np.dtype(v)
        except TypeError as e:
            raise ValueError(f"unknown numpy dtype: {v!r}") from e
        return v


class ConfigSchema(BaseModel):
    model_config = ConfigDict(extra="allow")

    log_level: Optional[str] = None
    contracts: ContractsBlock = Field(default_factory=ContractsBlock)
    labeling: LabelingBlock = Field(default_factory=LabelingBlock)
    imaging: ImagingBlock = Field(default_factory=ImagingBlock)

    @field_validator("log_level")
    @classmethod
    def _level(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        s = str(v).upper().strip()
        if s not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"invalid log level: {v!r}")
        return s


# ---------------------------- unknown keys ----------------------------


_TOP_KEYS = {"log_level", "contracts", "labeling", "imaging"}

_SECTION_KEYS = {
    "contracts": {"strict"},
    "labeling": {"dx", "dy"},
    "imaging": {"dtype", "background"},
}


def find_unknown_keys(cfg: Dict[str, Any]) -> Dict[str, List[str]]:
    """Return unknown keys grouped by section."""

    unknown: Dict[str, List[str]] = {}

    top_unknown = sorted(str(k) for k in cfg.keys() if str(k) not in _TOP_KEYS)
    if top_unknown:
        unknown["top"] = top_unknown

    for sec, known in _SECTION_KEYS.items():
        block = cfg.get(sec)
        if isinstance(block, dict):
            u = sorted(str(k) for k in block.keys() if str(k) not in known)
            if u:
                unknown[sec] = u

    return unknown


def schema_validate(cfg: Dict[str, Any]) -> SchemaReport:
    """Validate config dict against the pydantic schema."""

    unknown = find_unknown_keys(cfg)
    if unknown:
        items: List[str] = []
        for sec, keys in unknown.items():
            for k in keys:
                items.append(f"{sec}: {k}")
        msg = "Unknown config keys (typos are treated as errors):\n" + "\n".join(items)
        return SchemaReport(
            ok=False,
            errors=[SchemaIssue(code="UNKNOWN_KEYS", message=msg, hint="Remove/rename unknown keys")],
            warnings=[],
        )
    try:
        ConfigSchema.model_validate(cfg)
    except ValueError as e:
        # pydantic.ValidationError subclasses ValueError
        msg = str(e)
        if len(msg) > 2000:
            msg = msg[:2000] + "…"
        return SchemaReport(
            ok=False,
            errors=[SchemaIssue(code="SCHEMA", message=msg, hint="Check config types/sections")],
            warnings=[],
        )
    warnings: List[SchemaIssue] = []
    if isinstance(cfg.get("contracts"), dict) and cfg["contracts"].get("strict") is False:
        warnings.append(
            SchemaIssue(
                code="CONTRACTS_OFF",
                message="Contract checks disabled: unsorted run lists give undefined results",
            )
        )
    return SchemaReport(ok=True, errors=[], warnings=warnings)
