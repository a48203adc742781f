"""Console logging and timing.

Modules log through ``logging.getLogger(__name__)`` and never install
handlers themselves; applications call :func:`setup_logging` once.
"""

from __future__ import annotations

import logging
import os
import time

from rich.logging import RichHandler


_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _resolve_level(level: str | None) -> str:
    if level is None:
        from rle_regions.config import current_config

        level = current_config().log_level or os.environ.get("RLE_REGIONS_LOG_LEVEL") or "INFO"
    name = str(level).upper().strip()
    return name if name in _LEVELS else "INFO"


def setup_logging(level: str | None = None) -> str:
    """Install a single RichHandler on the root logger; returns the level used.

    Without ``level`` the active config's ``log_level`` is used, then env
    ``RLE_REGIONS_LOG_LEVEL``, then ``INFO``. Unknown names fall back to
    ``INFO``. Repeated calls replace the handler.
    """
    name = _resolve_level(level)
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    handler = RichHandler(rich_tracebacks=True, show_path=False, omit_repeated_times=False, log_time_format="[%H:%M:%S]")
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(name)
    return name


class timer:
    """Context manager that logs start, finish and failure of a step.

    ``elapsed`` holds the duration in seconds after the block exits.
    Exceptions are logged at ERROR and propagate.
    """

    def __init__(self, name: str, logger: logging.Logger | None = None, *, level: int = logging.DEBUG):
        self.name = name
        self.logger = logger or logging.getLogger("rle_regions")
        self.level = level
        self.elapsed = 0.0
        self._t0 = 0.0

    def __enter__(self) -> timer:
        self._t0 = time.perf_counter()
        self.logger.log(self.level, "▶ %s…", self.name)
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._t0
        if exc is not None:
            self.logger.error("✗ %s FAILED (%.3f s): %s", self.name, self.elapsed, exc)
        else:
            self.logger.log(self.level, "✓ %s (%.3f s)", self.name, self.elapsed)
        return False
