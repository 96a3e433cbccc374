"""Role models describing what a piece of text stands for on a page."""

from enum import Enum
from typing import Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field, model_validator

logger = structlog.get_logger(__name__)

# Beyond this, a requested text length is considered corrupted upstream data
MAX_HOLDER_LENGTH = 1000


class TextRole(str, Enum):
    """Semantic role of a sentence on a music sheet."""

    UNKNOWN = "UnknownRole"
    LYRICS = "Lyrics"
    TITLE = "Title"
    DIRECTION = "Direction"
    NUMBER = "Number"
    NAME = "Name"
    CREATOR = "Creator"
    RIGHTS = "Rights"
    CHORD = "Chord"

    def __str__(self) -> str:
        return self.value

    def string_holder(self, length: int) -> str:
        """
        Forge a string to be used in lieu of the real text value.

        Args:
            length: Number of characters desired

        Returns:
            A bracketed dummy string of exactly ``length`` characters, or a
            short ``<<length>>`` marker when the length is abnormally large
        """
        if length > MAX_HOLDER_LENGTH:
            logger.warning("Abnormal text length", role=self.value, length=length)
            return f"<<{length}>>"

        interior = length - 1
        chunks = ["["]
        size = 1
        while size < interior:
            chunks.append(f"{self.value}-")
            size += len(self.value) + 1

        return "".join(chunks)[: max(interior, 0)] + "]"


class CreatorType(str, Enum):
    """Kind of creator credited by a Creator text."""

    ARRANGER = "arranger"
    COMPOSER = "composer"
    LYRICIST = "lyricist"
    POET = "poet"
    TRANSCRIBER = "transcriber"
    TRANSLATOR = "translator"


class RoleInfo(BaseModel):
    """
    Role inferred for a text block.

    Combines the role tag with the creator sub-kind, which is only
    meaningful (and only accepted) for Creator texts.
    """

    model_config = ConfigDict(frozen=True)

    role: TextRole = Field(..., description="Semantic role of the text")
    creator_type: Optional[CreatorType] = Field(
        default=None, description="Kind of creator, for Creator role only"
    )

    @model_validator(mode="after")
    def validate_creator_type(self) -> "RoleInfo":
        """Ensure a creator type only accompanies the Creator role."""
        if self.creator_type is not None and self.role is not TextRole.CREATOR:
            raise ValueError(
                f"creator_type is only allowed for {TextRole.CREATOR.value}, "
                f"not {self.role.value}"
            )
        return self

    @classmethod
    def unknown(cls) -> "RoleInfo":
        return cls(role=TextRole.UNKNOWN)

    def __str__(self) -> str:
        if self.creator_type is not None:
            return f"{self.role.value}:{self.creator_type.value}"
        return self.role.value
