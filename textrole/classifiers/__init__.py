"""Text role classification."""

from textrole.classifiers.features import TextFeatures, derive_features
from textrole.classifiers.role_classifier import RoleClassifier, Rule, decide, guess_role

__all__ = [
    "TextFeatures",
    "derive_features",
    "RoleClassifier",
    "Rule",
    "decide",
    "guess_role",
]
