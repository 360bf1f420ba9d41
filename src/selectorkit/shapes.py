"""Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A plain width/height pair with a computed area.

    Example:
        >>> r = Rectangle(10, 20)
        >>> r.width, r.height, r.get_area()
        (10, 20, 200)
    """

    width: float
    height: float

    def get_area(self) -> float:
        """Return ``width * height`` for the current dimensions."""
        return self.width * self.height
