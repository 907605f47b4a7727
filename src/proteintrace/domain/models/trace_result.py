"""Model bundling everything a viewer needs to draw one structure."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .atom_record import AtomRecord, Position
from .bounding_box import BoundingBox
from .decode_result import DecodeIssue
from .protein_summary import ProteinSummary


@dataclass
class TraceResult:
    """Output of the trace pipeline for a single structure."""

    source: str
    atoms: List[AtomRecord]
    summary: ProteinSummary
    bounding_box: BoundingBox
    max_extent: Optional[float]
    camera_distance: float
    offset: Optional[Position] = None
    issues: List[DecodeIssue] = field(default_factory=list)
    sequences: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """JSON-friendly representation, without the atom list."""
        return {
            "source": self.source,
            "total_atoms": self.summary.total_atom_count,
            "backbone_residues": self.summary.backbone_residue_count,
            "chains": list(self.summary.chains),
            "drawn_atoms": len(self.atoms),
            "offset": list(self.offset) if self.offset is not None else None,
            "bounding_box": {
                "min": list(self.bounding_box.min),
                "max": list(self.bounding_box.max),
                "size": list(self.bounding_box.size),
            },
            "max_extent": self.max_extent,
            "camera_distance": self.camera_distance,
            "decode_issues": len(self.issues),
            "sequences": dict(self.sequences),
        }
