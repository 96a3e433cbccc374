"""Exception taxonomy for text role classification.

Distinguishes between bad caller input (refused outright) and failures of the
layout collaborator that resolves the structural context of a text block.
"""


class TextRoleError(Exception):
    """Base class for text role errors."""

    pass


class InvalidInputError(TextRoleError, ValueError):
    """The bounding box is missing or degenerate.

    Examples: no box at all, zero or negative width, zero or negative height.
    """

    pass


class ContextResolutionError(TextRoleError, LookupError):
    """No containing system, part or staff could be found for a point.

    Raised by the layout context, never by the classifier itself.
    """

    pass
