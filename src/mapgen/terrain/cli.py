"""Command-line interface for terrain generation."""

import argparse
import logging
import sys
import time
import tomllib
from pathlib import Path

import numpy as np
import structlog
from numpy.typing import NDArray
from pydantic import ValidationError

_ASCII_RAMP = " .:-=+*#%@"


def _parse_seed(value: str) -> int | str:
    """Integers stay integers; anything else is hashed as a string seed."""
    try:
        return int(value)
    except ValueError:
        return value


def render_ascii(
    heights: NDArray[np.float64],
    grid: NDArray[np.uint8] | None,
    labels: list[str],
    output: str,
) -> str:
    """Render a small text preview of a generated map.

    Binary maps use ``#`` for filled cells, region maps the first letter of
    each label, and continuous maps a brightness ramp.
    """
    rows = []
    if output == "binary" and grid is not None:
        for row in grid:
            rows.append("".join("#" if v else "." for v in row))
    elif output == "regions" and grid is not None:
        initials = [label[:1] or "?" for label in labels]
        for row in grid:
            rows.append("".join(initials[v] for v in row))
    else:
        levels = np.clip(heights, 0.0, 1.0) * (len(_ASCII_RAMP) - 1)
        for row in np.rint(levels).astype(int):
            rows.append("".join(_ASCII_RAMP[v] for v in row))
    return "\n".join(rows)


def main() -> None:
    """CLI entry point for terrain generation."""
    parser = argparse.ArgumentParser(
        description="Generate a procedural terrain height map"
    )
    parser.add_argument(
        "--config", "-c", type=str, default=None, help="TOML config file"
    )
    parser.add_argument("--width", type=int, default=None, help="Map width")
    parser.add_argument("--height", type=int, default=None, help="Map height")
    parser.add_argument(
        "--seed",
        type=_parse_seed,
        default=None,
        help="Integer or string seed (overrides config)",
    )
    parser.add_argument(
        "--random-seed",
        action="store_true",
        help="Ignore configured seed and pick a random one",
    )
    parser.add_argument(
        "--mode",
        choices=["continuous", "binary", "regions"],
        default=None,
        help="Output mode (overrides config)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Save the map to this path (written as .npz)",
    )
    parser.add_argument(
        "--preview", action="store_true", help="Print a text preview of the map"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args()

    level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )

    # Import here to avoid slow startup for --help
    from ..exceptions import TerrainError
    from .config import GenerationConfig, load_config
    from .generator import generate_terrain
    from .persistence import save_map

    overrides: dict[str, object] = {}
    if args.width is not None:
        overrides["width"] = args.width
    if args.height is not None:
        overrides["height"] = args.height
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.random_seed:
        overrides["seed"] = None
    if args.mode is not None:
        overrides["output"] = args.mode

    start_time = time.time()
    try:
        base = load_config(Path(args.config)) if args.config else GenerationConfig()
        config = GenerationConfig.model_validate({**base.model_dump(), **overrides})
        result = generate_terrain(config)
    except (TerrainError, OSError, tomllib.TOMLDecodeError, ValidationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)
    gen_time = time.time() - start_time

    print(
        f"Generated {config.width}x{config.height} map "
        f"with seed {result.seed} in {gen_time:.2f}s"
    )

    if args.preview:
        preview = render_ascii(
            result.heights, result.grid, result.labels, config.output.value
        )
        print(preview)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        saved_path = save_map(output_path, result)
        print(f"Saved to {saved_path}")


if __name__ == "__main__":
    main()
