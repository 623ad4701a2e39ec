"""Shared utilities: logging and configuration."""

from .logging import get_logger
from .config import GridConfig, load_config, load_grid_config

__all__ = ["get_logger", "GridConfig", "load_config", "load_grid_config"]
