"""Region classification: threshold table lookup and binary fill mask."""

from collections.abc import Sequence

import numpy as np
import structlog
from numpy.typing import NDArray

from ..exceptions import UnclassifiedCellError
from .config import RegionThreshold, UnclassifiedPolicy

logger = structlog.get_logger()


def classify_regions(
    field: NDArray[np.float64],
    regions: Sequence[RegionThreshold],
    policy: UnclassifiedPolicy = UnclassifiedPolicy.LAST,
) -> NDArray[np.uint8]:
    """Classify each cell into a region index.

    A cell gets the first region (in table order) whose ``height`` is
    greater than or equal to the cell value.

    Args:
        field: Final height field.
        regions: Region thresholds in ascending height order.
        policy: What to do with cells above the highest threshold.
            ``LAST`` assigns the last region, ``STRICT`` raises.

    Returns:
        Region indices as uint8, same shape as ``field``.

    Raises:
        UnclassifiedCellError: Under ``STRICT`` when any cell exceeds every
            threshold.
    """
    thresholds = np.array([r.height for r in regions], dtype=np.float64)

    # side="left" finds the first threshold >= value
    indices = np.searchsorted(thresholds, field, side="left")

    overflow = indices >= len(regions)
    overflow_count = int(np.sum(overflow))
    if overflow_count:
        if policy == UnclassifiedPolicy.STRICT:
            raise UnclassifiedCellError(
                overflow_count, float(field.max()), float(thresholds[-1])
            )
        logger.debug(
            "unclassified_cells_assigned_last",
            count=overflow_count,
            label=regions[-1].label,
        )
        indices[overflow] = len(regions) - 1

    return indices.astype(np.uint8)


def threshold_mask(
    field: NDArray[np.float64],
    threshold: float,
) -> NDArray[np.uint8]:
    """Binary fill mask: 0 where the value is below ``threshold``, else 1."""
    return (field >= threshold).astype(np.uint8)


def region_labels(
    grid: NDArray[np.uint8],
    regions: Sequence[RegionThreshold],
) -> NDArray[np.str_]:
    """Expand a region index grid into label strings."""
    labels = np.array([r.label for r in regions])
    return labels[grid]


def region_counts(
    grid: NDArray[np.uint8],
    regions: Sequence[RegionThreshold],
) -> dict[str, int]:
    """Count cells per region label, in table order."""
    counts = np.bincount(grid.ravel(), minlength=len(regions))
    result: dict[str, int] = {}
    for i, region in enumerate(regions):
        result[region.label] = result.get(region.label, 0) + int(counts[i])
    return result
