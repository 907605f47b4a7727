"""Model for the summary statistics shown next to a structure."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ProteinSummary:
    """Read-only counts describing a decoded structure."""

    total_atom_count: int
    backbone_residue_count: int
    chains: Tuple[str, ...] = ()

    @property
    def chain_count(self) -> int:
        return len(self.chains)
