"""Uniform square-tile grid over a rectangular extent.

A `TileGrid` partitions a bounding box into `ncolumns x nrows` square
tiles of side `tile_size`.  Tiles are addressed by a single integer id
numbered row-major from the minimum corner::

    tile_id = row * ncolumns + col

The grid converts coordinates to tile ids and back, answers neighbour
queries and enumerates the tiles overlapping a query box.  Columns wrap
around (the right neighbour of the last column is the first column of
the same row), rows do not: the top and bottom neighbours of the edge
rows are the tiles themselves.  This models a lon/lat extent that is
continuous across the antimeridian but bounded at the poles.

Coordinate lookups return `INVALID_TILE_ID` (-1) for positions outside
the grid.  Id-based helpers (`tile_bounds`, neighbours, `relative_tile`)
do not validate their input; callers must keep ids within
``[0, tile_count())``.
"""

import math
from collections import deque
from typing import Deque, List, Optional, Set, Tuple

import numpy as np

from src.geometry import AABB, Point
from src.utils.logging import get_logger

logger = get_logger(__name__)

INVALID_TILE_ID = -1
"""Returned by coordinate lookups that fall outside the grid."""

WORLD_BOUNDS = AABB(-180.0, -90.0, 180.0, 90.0)


class TileGrid:
    """Row-major grid of square tiles covering `bounds`."""

    def __init__(self, bounds: AABB, tile_size: float):
        """Create a grid.

        Parameters
        ----------
        bounds : AABB
            Full extent covered by the grid.
        tile_size : float
            Edge length of each tile, in the units of `bounds`.

        Raises
        ------
        ValueError
            If `tile_size` is not positive or `bounds` is inverted.
        """
        tile_size = float(tile_size)
        if not tile_size > 0:
            raise ValueError(f"Tile size must be positive: {tile_size}")
        if bounds.max_x < bounds.min_x or bounds.max_y < bounds.min_y:
            raise ValueError(f"Invalid grid bounds: {bounds.to_tuple()}")

        self._bounds = bounds
        self._tile_size = tile_size
        self._ncolumns = int(math.ceil(bounds.width / tile_size))
        self._nrows = int(math.ceil(bounds.height / tile_size))
        logger.debug(
            "Created tile grid %s with tile size %s: %d columns x %d rows",
            bounds.to_tuple(), tile_size, self._ncolumns, self._nrows
        )

    @classmethod
    def world(cls, tile_size: float) -> "TileGrid":
        """Grid over the full lon/lat extent (-180, -90, 180, 90)."""
        return cls(WORLD_BOUNDS, tile_size)

    def __repr__(self) -> str:
        return (f"TileGrid(bounds={self._bounds.to_tuple()}, tile_size={self._tile_size}, "
                f"ncolumns={self._ncolumns}, nrows={self._nrows})")

    # -- Derived geometry ---------------------------------------------------
    @property
    def bounds(self) -> AABB:
        return self._bounds

    @property
    def tile_size(self) -> float:
        return self._tile_size

    @property
    def ncolumns(self) -> int:
        return self._ncolumns

    @property
    def nrows(self) -> int:
        return self._nrows

    def tile_count(self) -> int:
        """Total number of addressable tiles."""
        nrows = self._bounds.height / self._tile_size
        return self._ncolumns * int(math.ceil(nrows))

    # -- Coordinate -> index ------------------------------------------------
    def row(self, y: float) -> int:
        """Row containing `y`, or -1 if `y` lies outside the grid.

        A value equal to the maximum y belongs to the last row.
        """
        # NaN fails both comparisons and is treated as outside
        if not self._bounds.min_y <= y <= self._bounds.max_y:
            return INVALID_TILE_ID
        if y == self._bounds.max_y:
            return self._nrows - 1
        row = math.floor((y - self._bounds.min_y) / self._tile_size)
        return min(row, self._nrows - 1)

    def col(self, x: float) -> int:
        """Column containing `x`, or -1 if `x` lies outside the grid.

        A value equal to the maximum x belongs to the last column.
        """
        if not self._bounds.min_x <= x <= self._bounds.max_x:
            return INVALID_TILE_ID
        if x == self._bounds.max_x:
            return self._ncolumns - 1
        col = math.floor((x - self._bounds.min_x) / self._tile_size)
        return min(col, self._ncolumns - 1)

    def tile_id(self, point: Point) -> int:
        """Id of the tile containing `point`, or -1 if outside the grid."""
        return self.tile_id_xy(point.x, point.y)

    def tile_id_xy(self, x: float, y: float) -> int:
        """Id of the tile containing `(x, y)`, or -1 if outside the grid."""
        row = self.row(y)
        col = self.col(x)
        if row < 0 or col < 0:
            return INVALID_TILE_ID
        return row * self._ncolumns + col

    def tile_id_from_cell(self, col: int, row: int) -> int:
        """Compose a tile id from a column and row.  No range checking."""
        return row * self._ncolumns + col

    def tile_ids(self, xs, ys) -> np.ndarray:
        """Vectorised `tile_id_xy` for arrays of coordinates.

        Parameters
        ----------
        xs, ys : array_like
            Coordinates of equal length.

        Returns
        -------
        numpy.ndarray
            Tile ids as int64, -1 for points outside the grid.
        """
        x = np.asarray(xs, dtype=float)
        y = np.asarray(ys, dtype=float)
        if x.shape != y.shape:
            raise ValueError(f"Coordinate arrays differ in shape: {x.shape} vs {y.shape}")

        b = self._bounds
        inside = (x >= b.min_x) & (x <= b.max_x) & (y >= b.min_y) & (y <= b.max_y)

        # Outside and non-finite values are parked on the origin before the cast
        x = np.where(inside, x, b.min_x)
        y = np.where(inside, y, b.min_y)
        col = np.floor((x - b.min_x) / self._tile_size).astype(np.int64)
        row = np.floor((y - b.min_y) / self._tile_size).astype(np.int64)
        # Points on the max edge belong to the last column/row
        col = np.minimum(col, self._ncolumns - 1)
        row = np.minimum(row, self._nrows - 1)
        inside &= (col >= 0) & (row >= 0)

        ids = row * self._ncolumns + col
        return np.where(inside, ids, INVALID_TILE_ID).astype(np.int64)

    # -- Index -> coordinate ------------------------------------------------
    def row_col(self, tile_id: int) -> Tuple[int, int]:
        """Split a tile id into `(row, col)`."""
        row = tile_id // self._ncolumns
        return row, tile_id - row * self._ncolumns

    def base(self, tile_id: int) -> Point:
        """Minimum corner of a tile."""
        row, col = self.row_col(tile_id)
        return Point(self._bounds.min_x + col * self._tile_size,
                     self._bounds.min_y + row * self._tile_size)

    def tile_bounds(self, tile_id: int) -> AABB:
        """Bounding box of a tile given its id."""
        base = self.base(tile_id)
        return AABB(base.x, base.y, base.x + self._tile_size, base.y + self._tile_size)

    def cell_bounds(self, col: int, row: int) -> AABB:
        """Bounding box of the tile at `(col, row)`."""
        min_x = self._bounds.min_x + col * self._tile_size
        min_y = self._bounds.min_y + row * self._tile_size
        return AABB(min_x, min_y, min_x + self._tile_size, min_y + self._tile_size)

    def center(self, tile_id: int) -> Point:
        """Centre point of a tile."""
        base = self.base(tile_id)
        half = self._tile_size * 0.5
        return Point(base.x + half, base.y + half)

    # -- Neighbours and offsets ---------------------------------------------
    def right_neighbor(self, tile_id: int) -> int:
        """Tile to the right, wrapping to the first column of the row."""
        _, col = self.row_col(tile_id)
        if col < self._ncolumns - 1:
            return tile_id + 1
        return tile_id - self._ncolumns + 1

    def left_neighbor(self, tile_id: int) -> int:
        """Tile to the left, wrapping to the last column of the row."""
        _, col = self.row_col(tile_id)
        if col > 0:
            return tile_id - 1
        return tile_id + self._ncolumns - 1

    def top_neighbor(self, tile_id: int) -> int:
        """Tile above; a tile in the last row is its own top neighbour."""
        if tile_id < self.tile_count() - self._ncolumns:
            return tile_id + self._ncolumns
        return tile_id

    def bottom_neighbor(self, tile_id: int) -> int:
        """Tile below; a tile in the first row is its own bottom neighbour."""
        if tile_id < self._ncolumns:
            return tile_id
        return tile_id - self._ncolumns

    def neighbors(self, tile_id: int) -> List[int]:
        """Distinct neighbours in the order left, right, top, bottom.

        The tile itself is never included, which drops the clamped
        top/bottom neighbours of edge rows and, on grids of one or two
        columns, the repeated wrap neighbours.
        """
        result: List[int] = []
        for neighbor in (self.left_neighbor(tile_id),
                         self.right_neighbor(tile_id),
                         self.top_neighbor(tile_id),
                         self.bottom_neighbor(tile_id)):
            if neighbor != tile_id and neighbor not in result:
                result.append(neighbor)
        return result

    def relative_tile(self, tile_id: int, delta_rows: int, delta_cols: int) -> int:
        """Offset a tile id by whole rows and columns.

        Plain id arithmetic: the result is not range checked and a
        column offset may carry into the neighbouring row.
        """
        return tile_id + delta_rows * self._ncolumns + delta_cols

    def tile_offsets(self, from_id: int, to_id: int) -> Tuple[int, int]:
        """Row and column offsets that lead from `from_id` to `to_id`.

        ``relative_tile(from_id, *tile_offsets(from_id, to_id)) == to_id``.
        """
        delta_rows = to_id // self._ncolumns - from_id // self._ncolumns
        delta_cols = (to_id - from_id) - delta_rows * self._ncolumns
        return delta_rows, delta_cols

    # -- Region enumeration -------------------------------------------------
    def tile_list(self, query: AABB, max_tiles: Optional[int] = None) -> List[int]:
        """List the tiles intersecting `query`, nearest to its centre first.

        The search starts at the tile containing the centre of `query`
        and expands breadth-first through neighbours (left, right, top,
        bottom).  A neighbour is expanded further only if its bounds
        intersect `query`.  Each call works on its own queue and visited
        set, so a grid can be queried from several threads at once.

        Parameters
        ----------
        query : AABB
            Region to cover.
        max_tiles : int, optional
            Stop once this many tiles have been found.  None or a value
            <= 0 disables the cap.

        Returns
        -------
        list of int
            Tile ids in discovery order.  Empty if the centre of `query`
            lies outside the grid, even when part of `query` overlaps it.
        """
        tiles: List[int] = []
        seed = self.tile_id(query.center())
        if seed == INVALID_TILE_ID:
            logger.debug("Query centre %s outside grid, no tiles", query.center())
            return tiles

        limit = max_tiles if max_tiles is not None and max_tiles > 0 else None

        tiles.append(seed)
        visited: Set[int] = {seed}
        pending: Deque[int] = deque()
        self._enqueue_neighbors(seed, pending, visited)

        while pending and (limit is None or len(tiles) < limit):
            tile_id = pending.popleft()
            if not query.intersects(self.tile_bounds(tile_id)):
                continue
            tiles.append(tile_id)
            self._enqueue_neighbors(tile_id, pending, visited)

        logger.debug("Query %s matched %d tiles", query.to_tuple(), len(tiles))
        return tiles

    def _enqueue_neighbors(self, tile_id: int, pending: Deque[int], visited: Set[int]) -> None:
        # Tiles are marked visited when queued so each is examined once
        for neighbor in self.neighbors(tile_id):
            if neighbor not in visited:
                visited.add(neighbor)
                pending.append(neighbor)
