"""Map persistence: save and load generated maps."""

import json
from datetime import datetime, timezone
from pathlib import Path

import numpy as np
import structlog
from numpy.typing import NDArray

from .generator import GenerationResult
from .seeding import SEED_HASH

logger = structlog.get_logger()

FORMAT_VERSION = 1


def save_map(path: Path, result: GenerationResult) -> Path:
    """Save a generated map to disk.

    Uses numpy's compressed .npz format. The configuration, resolved seed
    and region labels go into a JSON metadata blob.

    Args:
        path: Output path. Any other suffix is replaced with .npz.
        result: Generation result to store.

    Returns:
        The path actually written.
    """
    if path.suffix != ".npz":
        path = path.with_suffix(".npz")

    config = result.config
    metadata = {
        "version": FORMAT_VERSION,
        "seed": result.seed,
        "seed_hash": SEED_HASH,
        "width": config.width,
        "height": config.height,
        "output": config.output.value,
        "labels": result.labels,
        "config": config.model_dump(mode="json"),
        "generated_at": datetime.now(timezone.utc).isoformat(),
    }

    arrays: dict[str, NDArray] = {"heights": result.heights}
    if result.grid is not None:
        arrays["grid"] = result.grid

    np.savez_compressed(
        path,
        metadata=np.frombuffer(json.dumps(metadata).encode("utf-8"), dtype=np.uint8),
        **arrays,
    )

    file_size = path.stat().st_size / 1024
    logger.info("map_saved", path=str(path), size_kb=round(file_size, 1))
    return path


def load_map(
    path: Path,
) -> tuple[NDArray[np.float64], NDArray[np.uint8] | None, dict]:
    """Load a map from disk.

    Args:
        path: Path to .npz file.

    Returns:
        Tuple of (height field, output grid or None, metadata dict).

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValueError: If file format is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Map file not found: {path}")

    with np.load(path) as data:
        if "heights" not in data:
            raise ValueError("Invalid map file: missing 'heights' array")
        heights = data["heights"]

        grid = data["grid"] if "grid" in data else None

        if "metadata" in data:
            metadata = json.loads(data["metadata"].tobytes().decode("utf-8"))
        else:
            metadata = {}

    if grid is not None and grid.shape != heights.shape:
        raise ValueError(
            f"Invalid map file: grid shape {grid.shape} does not match "
            f"heights shape {heights.shape}"
        )

    logger.info(
        "map_loaded", path=str(path), width=heights.shape[1], height=heights.shape[0]
    )
    return heights, grid, metadata
