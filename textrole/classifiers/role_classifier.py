"""Rule-based inference of the role of a text block on a music sheet."""

from typing import Callable, Dict, NamedTuple, Optional, Tuple

import structlog

from textrole import config
from textrole.adapters.layout_context import StructuralContext
from textrole.classifiers.features import TextFeatures, derive_features
from textrole.config import ThresholdConfig
from textrole.schemas.geometry import StaffPosition, StyleHint, TextBlock
from textrole.schemas.role import CreatorType, RoleInfo, TextRole
from textrole.utils.scale import ScaleModel

logger = structlog.get_logger(__name__)


class Rule(NamedTuple):
    """One (predicate -> outcome) entry of a decision table."""

    name: str
    predicate: Callable[[TextFeatures, StyleHint], bool]
    outcome: RoleInfo


UNKNOWN = RoleInfo(role=TextRole.UNKNOWN)

# Title, Number, Creator, Direction
ABOVE_STAVES_RULES: Tuple[Rule, ...] = (
    Rule("tiny_sentence", lambda f, s: f.tiny_sentence, UNKNOWN),
    Rule(
        "first_system_left_of_staves",
        lambda f, s: f.first_system and f.left_of_staves,
        RoleInfo(role=TextRole.CREATOR, creator_type=CreatorType.LYRICIST),
    ),
    Rule(
        "first_system_right_aligned",
        lambda f, s: f.first_system and f.right_aligned,
        RoleInfo(role=TextRole.CREATOR, creator_type=CreatorType.COMPOSER),
    ),
    Rule(
        "first_system_close_to_staff",
        lambda f, s: f.first_system and f.close_to_staff,
        RoleInfo(role=TextRole.DIRECTION),
    ),
    Rule(
        "first_system_centered_high",
        lambda f, s: f.first_system and f.page_centered and f.high_text,
        RoleInfo(role=TextRole.TITLE),
    ),
    Rule(
        "first_system_centered",
        lambda f, s: f.first_system and f.page_centered,
        RoleInfo(role=TextRole.NUMBER),
    ),
    # First system with no positional cue at all
    Rule("first_system_default", lambda f, s: f.first_system, UNKNOWN),
    Rule("other_system", lambda f, s: True, RoleInfo(role=TextRole.DIRECTION)),
)

# Name, Lyrics, Direction
WITHIN_STAVES_RULES: Tuple[Rule, ...] = (
    Rule("left_of_staves", lambda f, s: f.left_of_staves, RoleInfo(role=TextRole.NAME)),
    Rule(
        "below_part_not_slanted",
        lambda f, s: (
            f.part_position is StaffPosition.BELOW_STAVES
            and s is not StyleHint.SLANTED
        ),
        RoleInfo(role=TextRole.LYRICS),
    ),
    Rule("within_default", lambda f, s: True, RoleInfo(role=TextRole.DIRECTION)),
)

# Copyright
BELOW_STAVES_RULES: Tuple[Rule, ...] = (
    Rule("tiny_sentence", lambda f, s: f.tiny_sentence, UNKNOWN),
    Rule(
        "last_system_centered_short",
        lambda f, s: f.page_centered and f.short_sentence and f.last_system,
        RoleInfo(role=TextRole.RIGHTS),
    ),
    Rule("below_default", lambda f, s: True, UNKNOWN),
)

RULES: Dict[StaffPosition, Tuple[Rule, ...]] = {
    StaffPosition.ABOVE_STAVES: ABOVE_STAVES_RULES,
    StaffPosition.WITHIN_STAVES: WITHIN_STAVES_RULES,
    StaffPosition.BELOW_STAVES: BELOW_STAVES_RULES,
}


def decide(features: TextFeatures, style_hint: StyleHint) -> Tuple[RoleInfo, str]:
    """
    Evaluate the rule table of the block's vertical position.

    Returns:
        Tuple of (role info, name of the rule that fired)
    """
    for rule in RULES[features.system_position]:
        if rule.predicate(features, style_hint):
            return rule.outcome, rule.name

    return UNKNOWN, "default"


class RoleClassifier:
    """
    Guess the role of textual items from their location within the page.

    Stateless apart from its threshold configuration, so a single instance
    can serve concurrent classifications.
    """

    def __init__(self, thresholds: Optional[ThresholdConfig] = None):
        self.thresholds = thresholds or config.settings.thresholds

    def features(
        self,
        box: Optional[TextBlock],
        context: StructuralContext,
        scale: ScaleModel,
    ) -> TextFeatures:
        """Derive the block features, with thresholds scaled for its page."""
        return derive_features(box, context, self.thresholds.to_pixels(scale))

    def classify(
        self,
        box: Optional[TextBlock],
        context: StructuralContext,
        style_hint: StyleHint,
        scale: ScaleModel,
    ) -> RoleInfo:
        """
        Infer the role of a text block.

        Args:
            box: Bounding box of the sentence, in page pixels
            context: Structural context resolved for the box reference point
            style_hint: Whether the text is mainly in italics
            scale: Scale of the page the box belongs to

        Returns:
            Inferred role, UnknownRole when no rule applies

        Raises:
            InvalidInputError: if the box is missing or degenerate
        """
        features = self.features(box, context, scale)
        role, rule = decide(features, style_hint)

        logger.debug(
            "Text role guessed",
            box=box.model_dump(),
            style_hint=style_hint.value,
            role=str(role),
            rule=rule,
            **features.as_log_dict(),
        )

        return role


def guess_role(
    box: Optional[TextBlock],
    context: StructuralContext,
    scale: ScaleModel,
    is_italic: Optional[bool] = None,
) -> RoleInfo:
    """Classify with the configured thresholds, from a nullable italic flag."""
    return RoleClassifier().classify(
        box, context, StyleHint.from_optional(is_italic), scale
    )
