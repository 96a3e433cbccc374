"""Page scale utilities converting interline fractions into pixels."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ScaleModel(Protocol):
    """Converts a resolution-independent distance into page pixels."""

    def to_pixels(self, fraction: float) -> int:
        ...


class InterlineScale:
    """
    Scale of a page, based on its interline.

    The interline is the vertical distance, in pixels, between two
    consecutive lines of a staff. Distances expressed as a fraction of it
    stay valid whatever the scan resolution.
    """

    def __init__(self, interline: float):
        if interline <= 0:
            raise ValueError(f"Interline must be positive, got {interline}")
        self.interline = interline

    def to_pixels(self, fraction: float) -> int:
        # round() is half-to-even, like rint
        return int(round(self.interline * fraction))

    def __repr__(self) -> str:
        return f"InterlineScale(interline={self.interline})"
