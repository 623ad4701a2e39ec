"""Tiling package.

Provides the uniform tile grid used to index a rectangular extent,
helpers to describe tiles as pandas tables, and a small command line
front end.
"""

from .tile_grid import TileGrid, INVALID_TILE_ID, WORLD_BOUNDS
from .export import tile_metadata, tiles_to_dataframe

__all__ = [
    "TileGrid",
    "INVALID_TILE_ID",
    "WORLD_BOUNDS",
    "tile_metadata",
    "tiles_to_dataframe",
]
