"""Tests for role and geometry schemas."""

import pytest
from pydantic import ValidationError

from textrole.schemas.geometry import PixelPoint, StyleHint, TextBlock
from textrole.schemas.role import CreatorType, RoleInfo, TextRole


def test_role_info_equality():
    composer = RoleInfo(role=TextRole.CREATOR, creator_type=CreatorType.COMPOSER)
    assert composer == RoleInfo(role=TextRole.CREATOR, creator_type=CreatorType.COMPOSER)
    assert composer != RoleInfo(role=TextRole.CREATOR, creator_type=CreatorType.LYRICIST)
    assert composer != RoleInfo(role=TextRole.CREATOR)
    assert RoleInfo.unknown() == RoleInfo(role=TextRole.UNKNOWN)


def test_role_info_is_immutable_and_hashable():
    title = RoleInfo(role=TextRole.TITLE)
    with pytest.raises(ValidationError):
        title.role = TextRole.NUMBER
    assert len({title, RoleInfo(role=TextRole.TITLE)}) == 1


def test_creator_type_only_for_creator():
    with pytest.raises(ValidationError, match="creator_type"):
        RoleInfo(role=TextRole.TITLE, creator_type=CreatorType.COMPOSER)


def test_role_info_str():
    assert str(RoleInfo(role=TextRole.CREATOR, creator_type=CreatorType.LYRICIST)) == "Creator:lyricist"
    assert str(RoleInfo(role=TextRole.LYRICS)) == "Lyrics"
    assert str(RoleInfo.unknown()) == "UnknownRole"


def test_role_info_serialization():
    data = RoleInfo(role=TextRole.CREATOR, creator_type=CreatorType.ARRANGER).model_dump(mode="json")
    assert data == {"role": "Creator", "creator_type": "arranger"}
    assert RoleInfo.model_validate(data).creator_type is CreatorType.ARRANGER


@pytest.mark.parametrize(
    "role, length, expected",
    [
        (TextRole.TITLE, 10, "[Title-Ti]"),
        (TextRole.TITLE, 14, "[Title-Title-]"),
        (TextRole.LYRICS, 3, "[L]"),
        (TextRole.NAME, 2, "[]"),
        (TextRole.NAME, 1, "]"),
        (TextRole.NAME, 0, "]"),
        (TextRole.UNKNOWN, 13, "[UnknownRole]"),
    ],
)
def test_string_holder(role, length, expected):
    assert role.string_holder(length) == expected


def test_string_holder_has_requested_length():
    for length in (2, 7, 50, 999, 1000):
        assert len(TextRole.DIRECTION.string_holder(length)) == length


def test_string_holder_abnormal_length():
    assert TextRole.RIGHTS.string_holder(1001) == "<<1001>>"


def test_text_block_points():
    box = TextBlock(x=10, y=20, width=31, height=15)
    assert box.left_point == PixelPoint(x=10, y=27)
    assert box.right_point == PixelPoint(x=41, y=27)
    assert box.center_x == 25
    assert not box.is_degenerate
    assert TextBlock(x=0, y=0, width=5, height=0).is_degenerate


@pytest.mark.parametrize(
    "is_italic, expected",
    [(True, StyleHint.SLANTED), (False, StyleHint.UPRIGHT), (None, StyleHint.UNKNOWN)],
)
def test_style_hint_from_optional(is_italic, expected):
    assert StyleHint.from_optional(is_italic) is expected
