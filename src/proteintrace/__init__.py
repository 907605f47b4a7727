"""Decode PDB atom records and derive a simplified backbone geometry for viewers."""

from .domain.models import (
    AtomRecord,
    BoundingBox,
    DecodeIssue,
    DecodeResult,
    ProteinSummary,
    TraceResult,
)
from .io.pdb_decoder import PDBDecoder
from .pipeline import TracePipeline
from .services.geometry_service import GeometryService
from .services.selection_service import SelectionService

__version__ = "0.1.0"

__all__ = [
    "AtomRecord",
    "BoundingBox",
    "DecodeIssue",
    "DecodeResult",
    "ProteinSummary",
    "TraceResult",
    "PDBDecoder",
    "TracePipeline",
    "GeometryService",
    "SelectionService",
]
