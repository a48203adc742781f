from __future__ import annotations

import pytest

from rle_regions.config import configure


@pytest.fixture(autouse=True)
def _default_config(monkeypatch: pytest.MonkeyPatch):
    """Every test starts from the built-in defaults (strict contracts on)."""
    monkeypatch.delenv("RLE_REGIONS_STRICT", raising=False)
    monkeypatch.delenv("RLE_REGIONS_LOG_LEVEL", raising=False)
    configure(None)
    yield
    configure(None)
