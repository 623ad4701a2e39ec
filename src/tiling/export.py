"""Tabular description of grid tiles.

Converts a sequence of tile ids into a pandas DataFrame holding the
row/column, bounding box and centre of each tile.  Useful for inspecting
the result of `TileGrid.tile_list` or writing it out with the usual
pandas writers.
"""

from typing import Dict, Iterable, List

import pandas as pd

from .tile_grid import TileGrid

COLUMNS = [
    "tile_id", "row", "col",
    "bbox_x_min", "bbox_y_min", "bbox_x_max", "bbox_y_max",
    "center_x", "center_y",
]


def tile_metadata(grid: TileGrid, tile_id: int) -> Dict:
    """Describe a single tile as a flat dictionary.

    Parameters
    ----------
    grid : TileGrid
        Grid the tile belongs to.
    tile_id : int
        Tile id; not range checked.

    Returns
    -------
    dict
        Keys as listed in `COLUMNS`.
    """
    row, col = grid.row_col(tile_id)
    bbox = grid.tile_bounds(tile_id)
    center = grid.center(tile_id)
    return {
        "tile_id": tile_id,
        "row": row,
        "col": col,
        "bbox_x_min": bbox.min_x,
        "bbox_y_min": bbox.min_y,
        "bbox_x_max": bbox.max_x,
        "bbox_y_max": bbox.max_y,
        "center_x": center.x,
        "center_y": center.y,
    }


def tiles_to_dataframe(grid: TileGrid, tile_ids: Iterable[int]) -> pd.DataFrame:
    """Build a DataFrame with one row per tile id, in input order."""
    records: List[Dict] = [tile_metadata(grid, tile_id) for tile_id in tile_ids]
    return pd.DataFrame(records, columns=COLUMNS)
