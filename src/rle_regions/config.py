"""Configuration: YAML file -> validated :class:`ConfigSchema`.

The active configuration is process-wide. It starts from the schema
defaults plus environment overrides and can be replaced with
:func:`configure`.

Environment overrides (applied on top of file values):
  - ``RLE_REGIONS_STRICT``: ``1/0``, ``true/false``, ``yes/no``, ``on/off``
  - ``RLE_REGIONS_LOG_LEVEL``: logging level name

Example config.yaml::

    log_level: INFO
    contracts:
      strict: true
    labeling:
      dx: 1
      dy: 1
    imaging:
      dtype: uint8
      background: 0
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from rle_regions.schema import ConfigSchema, schema_validate


log = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}

_ACTIVE: ConfigSchema | None = None


def _env_overrides(cfg: dict[str, Any]) -> dict[str, Any]:
    strict = os.environ.get("RLE_REGIONS_STRICT")
    if strict is not None:
        s = strict.strip().lower()
        if s in _TRUE or s in _FALSE:
            contracts = dict(cfg.get("contracts") or {})
            contracts["strict"] = s in _TRUE
            cfg["contracts"] = contracts
        else:
            log.warning("Ignoring RLE_REGIONS_STRICT=%r (expected a boolean)", strict)
    level = os.environ.get("RLE_REGIONS_LOG_LEVEL")
    if level:
        cfg["log_level"] = level
    return cfg


def load_config(cfg_path: str | Path) -> ConfigSchema:
    """Load YAML config, apply env overrides and validate.

    Raises ``ValueError`` with the collected schema errors if the file is
    invalid (unknown keys included).
    """
    cfg_path = Path(cfg_path).expanduser().resolve()
    raw = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{cfg_path}: top level must be a mapping, got {type(raw).__name__}")

    report = schema_validate(raw)
    if not report.ok:
        raise ValueError(f"{cfg_path}: " + "; ".join(e.message for e in report.errors))
    for w in report.warnings:
        log.warning("%s: %s", cfg_path, w.message)

    cfg = ConfigSchema.model_validate(_env_overrides(dict(raw)))
    log.debug("Loaded config %s: %s", cfg_path, cfg.model_dump())
    return cfg


def load_config_any(cfg: Any) -> ConfigSchema:
    """Accept a path, a plain dict, an already validated schema, or None."""
    if cfg is None:
        return ConfigSchema.model_validate(_env_overrides({}))
    if isinstance(cfg, ConfigSchema):
        return cfg
    if isinstance(cfg, (str, Path)):
        return load_config(cfg)
    if isinstance(cfg, dict):
        report = schema_validate(cfg)
        if not report.ok:
            raise ValueError("; ".join(e.message for e in report.errors))
        return ConfigSchema.model_validate(cfg)
    raise TypeError(f"Unsupported config type: {type(cfg)}")


def configure(cfg: Any = None) -> ConfigSchema:
    """Install ``cfg`` (see :func:`load_config_any`) as the active config."""
    global _ACTIVE
    _ACTIVE = load_config_any(cfg)
    return _ACTIVE


def current_config() -> ConfigSchema:
    if _ACTIVE is None:
        return configure(None)
    return _ACTIVE


def write_config(cfg: ConfigSchema | dict[str, Any], out_path: str | Path) -> None:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    data = cfg.model_dump(exclude_none=True) if isinstance(cfg, ConfigSchema) else dict(cfg)
    with out_path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
