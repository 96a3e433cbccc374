"""Adapter exposing page layout geometry as the classifier's structural context."""

from typing import List, Protocol, Sequence, Tuple

import structlog
from pydantic import BaseModel, ConfigDict, Field

from textrole.exceptions import ContextResolutionError
from textrole.schemas.geometry import PixelPoint, StaffPosition

logger = structlog.get_logger(__name__)


class StructuralContext(Protocol):
    """
    Read-only view of the system containing a text block.

    Every point-based query is meant to be called with the block's
    reference point (left edge, vertical middle).
    """

    @property
    def system_id(self) -> int:
        """1-based rank of the system in its page."""
        ...

    @property
    def system_count(self) -> int:
        ...

    @property
    def page_width(self) -> int:
        ...

    @property
    def system_left(self) -> int:
        ...

    @property
    def system_width(self) -> int:
        ...

    def staff_position(self, point: PixelPoint) -> StaffPosition:
        ...

    def part_staff_position(self, point: PixelPoint) -> StaffPosition:
        ...

    def staff_top_left(self, point: PixelPoint) -> PixelPoint:
        ...

    def is_left_of_staves(self, point: PixelPoint) -> bool:
        ...


class StaffGeometry(BaseModel):
    """Pixel extent of one staff, from its top line to its bottom line."""

    model_config = ConfigDict(frozen=True)

    top: int
    bottom: int
    left: int
    right: int


class PartGeometry(BaseModel):
    """Staves of one part, top to bottom."""

    model_config = ConfigDict(frozen=True)

    staves: Tuple[StaffGeometry, ...] = ()


class SystemGeometry(BaseModel):
    """Parts of one system, top to bottom."""

    model_config = ConfigDict(frozen=True)

    parts: Tuple[PartGeometry, ...] = ()

    @property
    def staves(self) -> List[StaffGeometry]:
        return [staff for part in self.parts for staff in part.staves]


class PageGeometry(BaseModel):
    """Systems of one page, top to bottom, as produced by layout analysis."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(..., gt=0, description="Page width in pixels")
    systems: Tuple[SystemGeometry, ...] = ()


def _position_wrt(staves: Sequence[StaffGeometry], y: int) -> StaffPosition:
    if y < staves[0].top:
        return StaffPosition.ABOVE_STAVES
    if y > staves[-1].bottom:
        return StaffPosition.BELOW_STAVES
    return StaffPosition.WITHIN_STAVES


def _vertical_gap(top: int, bottom: int, y: int) -> int:
    if y < top:
        return top - y
    if y > bottom:
        return y - bottom
    return 0


class SystemLayout:
    """Structural context backed by in-memory page geometry."""

    def __init__(self, page: PageGeometry, index: int):
        if not 0 <= index < len(page.systems):
            raise ContextResolutionError(
                f"No system #{index + 1} in a page of {len(page.systems)} systems"
            )
        system = page.systems[index]
        parts = [part for part in system.parts if part.staves]
        if not parts:
            raise ContextResolutionError(f"System #{index + 1} has no staves")

        self._page = page
        self._index = index
        self._parts = parts
        self._staves = [staff for part in parts for staff in part.staves]
        self._left = min(staff.left for staff in self._staves)
        self._right = max(staff.right for staff in self._staves)

    @property
    def system_id(self) -> int:
        return self._index + 1

    @property
    def system_count(self) -> int:
        return len(self._page.systems)

    @property
    def page_width(self) -> int:
        return self._page.width

    @property
    def system_left(self) -> int:
        return self._left

    @property
    def system_width(self) -> int:
        return self._right - self._left

    def staff_position(self, point: PixelPoint) -> StaffPosition:
        return _position_wrt(self._staves, point.y)

    def part_above(self, point: PixelPoint) -> PartGeometry:
        """Last part starting at or above the point, or the first part."""
        found = self._parts[0]
        for part in self._parts:
            if part.staves[0].top <= point.y:
                found = part
            else:
                break
        return found

    def part_staff_position(self, point: PixelPoint) -> StaffPosition:
        return _position_wrt(self.part_above(point).staves, point.y)

    def staff_at(self, point: PixelPoint) -> StaffGeometry:
        """Staff vertically closest to the point (first one on ties)."""
        return min(
            self._staves,
            key=lambda staff: _vertical_gap(staff.top, staff.bottom, point.y),
        )

    def staff_top_left(self, point: PixelPoint) -> PixelPoint:
        staff = self.staff_at(point)
        return PixelPoint(x=staff.left, y=staff.top)

    def is_left_of_staves(self, point: PixelPoint) -> bool:
        return point.x < self._left

    def __repr__(self) -> str:
        return f"SystemLayout(system={self.system_id}/{self.system_count})"


class PageLayout:
    """Resolves the system containing a given point of a page."""

    def __init__(self, page: PageGeometry):
        self.page = page

    def system_at(self, point: PixelPoint) -> SystemLayout:
        """
        Resolve the system closest vertically to the point.

        Raises:
            ContextResolutionError: if the page has no system with staves
        """
        best_index = None
        best_gap = None
        for index, system in enumerate(self.page.systems):
            staves = system.staves
            if not staves:
                continue
            gap = _vertical_gap(staves[0].top, staves[-1].bottom, point.y)
            if best_gap is None or gap < best_gap:
                best_index, best_gap = index, gap

        if best_index is None:
            logger.warning("No system found for point", x=point.x, y=point.y)
            raise ContextResolutionError(
                f"No system with staves for point ({point.x}, {point.y})"
            )

        return SystemLayout(self.page, best_index)
