"""Model for an axis-aligned bounding box."""

from dataclasses import dataclass

from .atom_record import Position


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned box around a set of atom positions.

    An axis component is None when at least one contributing coordinate
    on that axis was missing.
    """

    min: Position
    max: Position
    size: Position

    @classmethod
    def empty(cls) -> "BoundingBox":
        """Degenerate box used when there are no atoms."""
        origin = (0.0, 0.0, 0.0)
        return cls(min=origin, max=origin, size=origin)

    @property
    def is_complete(self) -> bool:
        """True when no axis is missing."""
        return all(value is not None for value in self.size)
