"""Unit tests for tile metadata export."""

import pandas as pd
import pytest

from src.geometry import AABB
from src.tiling import TileGrid
from src.tiling.export import COLUMNS, tile_metadata, tiles_to_dataframe


@pytest.fixture
def grid():
    return TileGrid(AABB(100.0, 200.0, 130.0, 220.0), 10.0)


class TestExport:
    """Test suite for tile metadata tables."""

    def test_tile_metadata(self, grid):
        """Test the flat description of a single tile."""
        metadata = tile_metadata(grid, 4)

        assert metadata['tile_id'] == 4
        assert metadata['row'] == 1
        assert metadata['col'] == 1
        assert metadata['bbox_x_min'] == 110.0
        assert metadata['bbox_y_min'] == 210.0
        assert metadata['bbox_x_max'] == 120.0
        assert metadata['bbox_y_max'] == 220.0
        assert metadata['center_x'] == 115.0
        assert metadata['center_y'] == 215.0

    def test_dataframe_follows_input_order(self, grid):
        """Test that rows keep the order of the tile ids."""
        tiles = grid.tile_list(AABB(112.0, 205.0, 118.0, 215.0))
        df = tiles_to_dataframe(grid, tiles)

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == COLUMNS
        assert df['tile_id'].tolist() == tiles
        assert len(df) == len(tiles)

    def test_empty_dataframe_keeps_columns(self, grid):
        """Test that an empty tile list still yields the schema."""
        df = tiles_to_dataframe(grid, [])

        assert len(df) == 0
        assert list(df.columns) == COLUMNS
