"""Adapters between page layout data and the classifier."""

from textrole.adapters.layout_context import (
    PageGeometry,
    PageLayout,
    PartGeometry,
    StaffGeometry,
    StructuralContext,
    SystemGeometry,
    SystemLayout,
)

__all__ = [
    "PageGeometry",
    "PageLayout",
    "PartGeometry",
    "StaffGeometry",
    "StructuralContext",
    "SystemGeometry",
    "SystemLayout",
]
