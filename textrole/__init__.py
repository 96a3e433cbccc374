"""Inference of the role of text blocks found on scanned music sheets."""

from textrole.classifiers.role_classifier import RoleClassifier, guess_role
from textrole.config import ThresholdConfig
from textrole.exceptions import ContextResolutionError, InvalidInputError, TextRoleError
from textrole.logging_config import configure_logging
from textrole.schemas.geometry import StyleHint, TextBlock
from textrole.schemas.role import CreatorType, RoleInfo, TextRole

__version__ = "1.0.0"

configure_logging()

__all__ = [
    "RoleClassifier",
    "guess_role",
    "ThresholdConfig",
    "ContextResolutionError",
    "InvalidInputError",
    "TextRoleError",
    "configure_logging",
    "StyleHint",
    "TextBlock",
    "CreatorType",
    "RoleInfo",
    "TextRole",
]
