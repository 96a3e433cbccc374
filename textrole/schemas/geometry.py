"""Pixel geometry models for text blocks on a scanned page."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PixelPoint(BaseModel):
    """Point in page pixel coordinates."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int


class TextBlock(BaseModel):
    """
    Axis-aligned bounding box of a text block, in page pixels.

    Degenerate boxes are accepted here and refused by the classifier,
    so that callers get a single error type for bad input.
    """

    model_config = ConfigDict(frozen=True)

    x: int = Field(..., description="Left abscissa")
    y: int = Field(..., description="Top ordinate")
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def center_x(self) -> int:
        return self.x + self.width // 2

    @property
    def mid_y(self) -> int:
        return self.y + self.height // 2

    @property
    def left_point(self) -> PixelPoint:
        """Reference point used for every layout query: left edge, mid height."""
        return PixelPoint(x=self.x, y=self.mid_y)

    @property
    def right_point(self) -> PixelPoint:
        return PixelPoint(x=self.right, y=self.mid_y)

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0


class StyleHint(str, Enum):
    """Whether the text is (mainly) slanted, i.e. in italics."""

    SLANTED = "slanted"
    UPRIGHT = "upright"
    UNKNOWN = "unknown"

    @classmethod
    def from_optional(cls, is_italic: Optional[bool]) -> "StyleHint":
        """Map a nullable italic flag, as OCR engines report it."""
        if is_italic is None:
            return cls.UNKNOWN
        return cls.SLANTED if is_italic else cls.UPRIGHT


class StaffPosition(str, Enum):
    """Vertical position of a point with respect to a set of staves."""

    ABOVE_STAVES = "above_staves"
    WITHIN_STAVES = "within_staves"
    BELOW_STAVES = "below_staves"
