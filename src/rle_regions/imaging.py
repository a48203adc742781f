"""Conversion between NumPy images and regions.

These are the only places where pixels are touched.

Image layout
------------
``image[y, x]``: array row index is the region row, array column index the
region column. :func:`region_to_image` crops to the bounding box, so the
returned array's ``[0, 0]`` is ``(region.left(), region.bottom())``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

import numpy as np

from rle_regions import region_vector
from rle_regions.config import current_config
from rle_regions.contracts import PreconditionViolation, require_finite
from rle_regions.interval import Interval
from rle_regions.region import Bounds, Region
from rle_regions.run import Run


log = logging.getLogger(__name__)


def from_mask(mask: np.ndarray) -> Region:
    """Region of the ``True`` (non-zero) pixels of a 2-D mask.

    Runs are emitted row by row, left to right, so the result is sorted and
    packed.
    """
    m = np.asarray(mask).astype(bool, copy=False)
    if m.ndim != 2:
        raise PreconditionViolation("MASK_NOT_2D", f"expected a 2-D mask, got shape {m.shape}")
    padded = np.pad(m, ((0, 0), (1, 1))).astype(np.int8)
    edges = np.diff(padded, axis=1)
    # Rising and falling edges come out in the same row-major order, one
    # falling edge per rising edge.
    rows, starts = np.nonzero(edges == 1)
    _, ends = np.nonzero(edges == -1)
    return Region([Run(int(y), Interval(int(s), int(e) - 1)) for y, s, e in zip(rows, starts, ends)])


def binarize(image: Any, predicate: Callable[[Any], bool] | None = None) -> Region:
    """Region of the pixels for which ``predicate(pixel)`` holds.

    ``predicate=None`` selects non-zero pixels. For a ``H x W x C`` image the
    predicate receives one length-``C`` pixel vector at a time.
    """
    arr = np.asarray(image)
    if arr.ndim not in (2, 3):
        raise PreconditionViolation("IMAGE_NOT_2D", f"expected an H x W or H x W x C image, got shape {arr.shape}")

    if predicate is None:
        mask = arr != 0
        if mask.ndim == 3:
            mask = mask.any(axis=2)
    elif arr.ndim == 2:
        mask = np.vectorize(predicate, otypes=[bool])(arr) if arr.size else np.zeros(arr.shape, dtype=bool)
    else:
        h, w, c = arr.shape
        flat = arr.reshape(-1, c)
        mask = np.fromiter((bool(predicate(px)) for px in flat), dtype=bool, count=h * w).reshape(h, w)

    region = from_mask(mask)
    log.debug("binarize: %s image -> %d runs", "x".join(str(s) for s in arr.shape), len(region.runs))
    return region


def _canvas(box: Bounds, sample: np.ndarray, dtype: Any, background: Any) -> np.ndarray:
    shape = (box.height, box.width) + sample.shape
    return np.full(shape, background, dtype=dtype)


def _paint(canvas: np.ndarray, region: Region, box: Bounds, color: np.ndarray) -> None:
    for run in region.runs:
        y = run.row - box.bottom
        x0 = run.columns.start - box.left
        x1 = run.columns.stop - box.left + 1
        canvas[y, x0:x1] = color


def _defaults(dtype: Any, background: Any) -> tuple[Any, Any]:
    cfg = current_config().imaging
    return (cfg.dtype if dtype is None else dtype), (cfg.background if background is None else background)


def region_to_image(region: Region, color: Any = 1, *, dtype: Any = None, background: Any = None) -> np.ndarray:
    """Paint ``region`` with ``color`` into an array cropped to its bounds.

    A scalar colour gives a ``H x W`` array, a tuple colour ``H x W x C``.
    Raises :class:`~rle_regions.contracts.PreconditionViolation` for complement
    or empty regions.
    """
    dtype, background = _defaults(dtype, background)
    require_finite(region, what="an image")
    box = region.bounds()
    c = np.asarray(color, dtype=dtype)
    canvas = _canvas(box, c, dtype, background)
    _paint(canvas, region, box, c)
    return canvas


def regions_to_image(
    regions: Sequence[Region],
    colors: Sequence[Any],
    *,
    dtype: Any = None,
    background: Any = None,
) -> np.ndarray:
    """Paint several regions into one array over their union bounding box.

    Region ``i`` gets ``colors[i % len(colors)]``; later regions paint over
    earlier ones.
    """
    if not regions:
        raise PreconditionViolation("NO_REGIONS", "cannot build an image from zero regions")
    if not colors:
        raise PreconditionViolation("NO_COLORS", "at least one color is required")
    dtype, background = _defaults(dtype, background)
    for r in regions:
        require_finite(r, what="an image")

    box = region_vector.bounds(regions)
    palette = [np.asarray(c, dtype=dtype) for c in colors]
    if len({p.shape for p in palette}) != 1:
        raise PreconditionViolation("MIXED_COLORS", "all colors must have the same number of channels")

    canvas = _canvas(box, palette[0], dtype, background)
    for i, r in enumerate(regions):
        _paint(canvas, r, box, palette[i % len(palette)])
    log.debug("regions_to_image: %d regions -> %s", len(regions), canvas.shape)
    return canvas
