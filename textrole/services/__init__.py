"""Application services."""

from textrole.services.page_classifier import PageTextClassifier

__all__ = ["PageTextClassifier"]
