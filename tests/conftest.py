"""Pytest configuration and shared fixtures for text role tests."""

import pytest

from textrole.adapters.layout_context import (
    PageGeometry,
    PartGeometry,
    StaffGeometry,
    SystemGeometry,
)
from textrole.classifiers.role_classifier import RoleClassifier
from textrole.schemas.geometry import PixelPoint, StaffPosition
from textrole.utils.scale import InterlineScale

# Page used by most tests: 2000 px wide, center at 1000,
# staves spanning 200..1800, interline of 10 px.
PAGE_WIDTH = 2000
SYSTEM_LEFT = 200
SYSTEM_WIDTH = 1600
STAFF_TOP = 400


class FakeContext:
    """In-memory structural context with fixed answers."""

    def __init__(
        self,
        position=StaffPosition.ABOVE_STAVES,
        part_position=StaffPosition.ABOVE_STAVES,
        system_id=1,
        system_count=3,
        page_width=PAGE_WIDTH,
        system_left=SYSTEM_LEFT,
        system_width=SYSTEM_WIDTH,
        staff_top=STAFF_TOP,
    ):
        self.position = position
        self.part_position = part_position
        self.system_id = system_id
        self.system_count = system_count
        self.page_width = page_width
        self.system_left = system_left
        self.system_width = system_width
        self.staff_top = staff_top
        self.queried_points = []

    def staff_position(self, point):
        self.queried_points.append(point)
        return self.position

    def part_staff_position(self, point):
        self.queried_points.append(point)
        return self.part_position

    def staff_top_left(self, point):
        self.queried_points.append(point)
        return PixelPoint(x=self.system_left, y=self.staff_top)

    def is_left_of_staves(self, point):
        self.queried_points.append(point)
        return point.x < self.system_left


@pytest.fixture
def scale():
    """Scale with a 10 px interline."""
    return InterlineScale(10)


@pytest.fixture
def classifier():
    """Classifier with default thresholds."""
    return RoleClassifier()


@pytest.fixture
def make_context():
    """Factory for fake structural contexts."""
    return FakeContext


@pytest.fixture
def page_geometry():
    """Two systems of two single-staff parts each."""

    def staff(top):
        return StaffGeometry(top=top, bottom=top + 40, left=SYSTEM_LEFT, right=SYSTEM_LEFT + SYSTEM_WIDTH)

    return PageGeometry(
        width=PAGE_WIDTH,
        systems=[
            SystemGeometry(
                parts=[
                    PartGeometry(staves=[staff(400)]),
                    PartGeometry(staves=[staff(600)]),
                ]
            ),
            SystemGeometry(
                parts=[
                    PartGeometry(staves=[staff(1200)]),
                    PartGeometry(staves=[staff(1400)]),
                ]
            ),
        ],
    )
