"""Utility helpers."""

from textrole.utils.scale import InterlineScale, ScaleModel

__all__ = ["InterlineScale", "ScaleModel"]
