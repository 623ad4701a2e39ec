"""Minimal planar geometry used by the tiling package."""

from .shapes import Point, AABB

__all__ = ["Point", "AABB"]
