#!/usr/bin/env python3
# src/proteintrace/domain/models/atom_record.py

"""
Domain model representing one decoded atom of a PDB file.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

# A coordinate is None when its source columns held no parseable number
Coordinate = Optional[float]
Position = Tuple[Coordinate, Coordinate, Coordinate]


@dataclass(frozen=True)
class AtomRecord:
    """Represents an atom decoded from an ATOM or HETATM record."""

    serial: Optional[int]
    name: str
    residue: str
    chain: str
    residue_sequence: Optional[int]
    position: Position
    element: str = ""
    hetero: bool = False

    @property
    def x(self) -> Coordinate:
        return self.position[0]

    @property
    def y(self) -> Coordinate:
        return self.position[1]

    @property
    def z(self) -> Coordinate:
        return self.position[2]

    @property
    def is_complete(self) -> bool:
        """True when all three coordinates are present."""
        return all(value is not None for value in self.position)
