"""Configuration loading for tile grids.

Grid definitions are kept in YAML files (see `configs/tile_grid.yaml`
at the project root).  A file looks like::

    bounds: [-180.0, -90.0, 180.0, 90.0]
    tile_size: 1.0
    max_tiles: 0

`load_config` returns the raw mapping and `GridConfig` validates it and
builds the corresponding `TileGrid`.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from src.geometry import AABB


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML configuration file into a dictionary.

    Parameters
    ----------
    path : str
        Path to the YAML configuration file.

    Returns
    -------
    dict
        Parsed configuration dictionary.  Returns an empty dict if the
        file does not exist or is empty.
    """
    cfg_path = Path(path)
    if not cfg_path.is_file():
        return {}
    with open(cfg_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration root must be a mapping: {cfg_path}")
    return data


@dataclass
class GridConfig:
    """Parameters defining a tile grid and its default query cap."""

    bounds: Tuple[float, float, float, float]
    """Grid extent as (min_x, min_y, max_x, max_y)."""

    tile_size: float
    """Edge length of each square tile, in the units of `bounds`."""

    max_tiles: Optional[int] = None
    """Default cap for tile enumeration; None or <= 0 means unbounded."""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GridConfig":
        """Validate a configuration mapping.

        Parameters
        ----------
        data : dict
            Mapping with `bounds`, `tile_size` and optionally `max_tiles`.

        Returns
        -------
        GridConfig
            Validated configuration.
        """
        missing = [key for key in ("bounds", "tile_size") if key not in data]
        if missing:
            raise ValueError(f"Missing grid configuration keys: {', '.join(missing)}")

        try:
            bounds = AABB.from_tuple(data["bounds"]).to_tuple()
            tile_size = float(data["tile_size"])
            max_tiles = data.get("max_tiles")
            if max_tiles is not None:
                max_tiles = int(max_tiles)
        except TypeError as exc:
            raise ValueError(f"Invalid grid configuration value: {exc}") from exc
        if tile_size <= 0:
            raise ValueError(f"Tile size must be positive: {tile_size}")

        return cls(bounds=bounds, tile_size=tile_size, max_tiles=max_tiles)

    def build_grid(self):
        """Create the `TileGrid` described by this configuration."""
        from src.tiling.tile_grid import TileGrid

        return TileGrid(AABB.from_tuple(self.bounds), self.tile_size)


def load_grid_config(path: str) -> GridConfig:
    """Load and validate a grid configuration file.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    """
    if not Path(path).is_file():
        raise FileNotFoundError(f"Grid configuration not found: {path}")
    return GridConfig.from_dict(load_config(path))
