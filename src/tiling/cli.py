"""Command line front end for tile enumeration.

Lists the tiles of a grid that overlap a query box and prints them as
CSV.  The grid is described either with flags or with a YAML file (see
`configs/tile_grid.yaml`); flags override values from the file.

Usage:
    python -m src.tiling.cli --bounds 0 0 4 4 --tile-size 1 --query 1 1 2 2
    python -m src.tiling.cli --config configs/tile_grid.yaml --query 4 50 6 52
"""

import argparse
import sys
from typing import List, Optional

import yaml

from src.geometry import AABB
from src.utils.config import GridConfig, load_config
from src.utils.logging import get_logger

from .export import tiles_to_dataframe

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="List the grid tiles overlapping a query box"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML grid configuration (bounds, tile_size, max_tiles)"
    )
    parser.add_argument(
        "--bounds",
        type=float,
        nargs=4,
        metavar=("MIN_X", "MIN_Y", "MAX_X", "MAX_Y"),
        default=None,
        help="Grid extent"
    )
    parser.add_argument(
        "--tile-size",
        type=float,
        default=None,
        help="Tile edge length in the units of the bounds"
    )
    parser.add_argument(
        "--query",
        type=float,
        nargs=4,
        metavar=("MIN_X", "MIN_Y", "MAX_X", "MAX_Y"),
        required=True,
        help="Query box"
    )
    parser.add_argument(
        "--max-tiles",
        type=int,
        default=None,
        help="Maximum number of tiles to return (default: unbounded)"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    args = build_parser().parse_args(argv)

    settings = {}
    if args.config:
        try:
            settings = load_config(args.config)
        except (ValueError, yaml.YAMLError) as exc:
            logger.error("Cannot read grid configuration %s: %s", args.config, exc)
            return 1
        if not settings:
            logger.error("Grid configuration not found or empty: %s", args.config)
            return 1
    if args.bounds is not None:
        settings["bounds"] = args.bounds
    if args.tile_size is not None:
        settings["tile_size"] = args.tile_size
    if args.max_tiles is not None:
        settings["max_tiles"] = args.max_tiles

    try:
        config = GridConfig.from_dict(settings)
        grid = config.build_grid()
    except ValueError as exc:
        logger.error("Invalid grid definition: %s", exc)
        return 1

    query = AABB.from_tuple(args.query)
    tiles = grid.tile_list(query, config.max_tiles)
    logger.info("%d tiles overlap %s on %r", len(tiles), query.to_tuple(), grid)

    tiles_to_dataframe(grid, tiles).to_csv(sys.stdout, index=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
