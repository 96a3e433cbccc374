"""Pydantic schemas for text roles and page geometry."""

from textrole.schemas.geometry import PixelPoint, StaffPosition, StyleHint, TextBlock
from textrole.schemas.role import CreatorType, RoleInfo, TextRole

__all__ = [
    "PixelPoint",
    "StaffPosition",
    "StyleHint",
    "TextBlock",
    "CreatorType",
    "RoleInfo",
    "TextRole",
]
