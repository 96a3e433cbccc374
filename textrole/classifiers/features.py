"""Geometric features of a text block, relative to its page and system."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from textrole.adapters.layout_context import StructuralContext
from textrole.config import PixelThresholds
from textrole.exceptions import InvalidInputError
from textrole.schemas.geometry import StaffPosition, TextBlock


class TextFeatures(BaseModel):
    """Boolean and categorical features the role rules are evaluated on."""

    model_config = ConfigDict(frozen=True)

    first_system: bool
    last_system: bool
    system_position: StaffPosition
    part_position: StaffPosition
    staff_dy: int
    close_to_staff: bool
    left_of_staves: bool
    page_centered: bool
    right_aligned: bool
    short_sentence: bool
    tiny_sentence: bool
    high_text: bool

    def as_log_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


def derive_features(
    box: Optional[TextBlock],
    context: StructuralContext,
    thresholds: PixelThresholds,
) -> TextFeatures:
    """
    Measure a text block against its system.

    Args:
        box: Unrotated bounding box of the text, in page pixels
        context: Structural context resolved for the box reference point
        thresholds: Thresholds already converted with this page's scale

    Returns:
        Features of the block

    Raises:
        InvalidInputError: if the box is missing or degenerate
    """
    if box is None:
        raise InvalidInputError("No bounding box provided")
    if box.is_degenerate:
        raise InvalidInputError(
            f"Degenerate bounding box {box.width}x{box.height} at ({box.x}, {box.y})"
        )

    left = box.left_point
    right = box.right_point

    staff_dy = abs(context.staff_top_left(left).y - box.y)
    page_center = context.page_width // 2
    system_right = context.system_left + context.system_width

    return TextFeatures(
        first_system=context.system_id == 1,
        last_system=context.system_id == context.system_count,
        system_position=context.staff_position(left),
        part_position=context.part_staff_position(left),
        staff_dy=staff_dy,
        close_to_staff=staff_dy <= thresholds.max_staff_dy,
        left_of_staves=context.is_left_of_staves(left),
        page_centered=abs(box.center_x - page_center) <= thresholds.max_center_dx,
        right_aligned=abs(right.x - system_right) <= thresholds.max_right_dx,
        short_sentence=box.width <= thresholds.max_short_length,
        tiny_sentence=box.width <= thresholds.max_tiny_length,
        high_text=box.height >= thresholds.min_title_height,
    )
