"""Domain model classes."""

from .atom_record import AtomRecord, Coordinate, Position
from .protein_summary import ProteinSummary
from .bounding_box import BoundingBox
from .decode_result import DecodeIssue, DecodeResult
from .trace_result import TraceResult

__all__ = [
    "AtomRecord",
    "Coordinate",
    "Position",
    "ProteinSummary",
    "BoundingBox",
    "DecodeIssue",
    "DecodeResult",
    "TraceResult",
]
