# src/proteintrace/services/selection_service.py
"""Service for filtering atom records and summarising a structure."""

from typing import Dict, List, Sequence

from Bio.SeqUtils import seq1

from ..constants import BACKBONE_MARKER
from ..domain.models.atom_record import AtomRecord
from ..domain.models.protein_summary import ProteinSummary


class SelectionService:
    """Pure filters and reductions over decoded atom records.

    None of the methods modify their input; every filter keeps the
    relative order of the records it returns.
    """

    def select_backbone(self, records: Sequence[AtomRecord]) -> List[AtomRecord]:
        """Keep only the alpha carbon of each residue."""
        return [record for record in records if record.name == BACKBONE_MARKER]

    def select_by_chain(
        self, records: Sequence[AtomRecord], chain_id: str
    ) -> List[AtomRecord]:
        """Keep records whose chain matches exactly (case-sensitive)."""
        return [record for record in records if record.chain == chain_id]

    def select_standard(self, records: Sequence[AtomRecord]) -> List[AtomRecord]:
        """Keep ATOM records."""
        return [record for record in records if not record.hetero]

    def select_hetero(self, records: Sequence[AtomRecord]) -> List[AtomRecord]:
        """Keep HETATM records (ligands, waters, modified residues)."""
        return [record for record in records if record.hetero]

    def distinct_chains(self, records: Sequence[AtomRecord]) -> List[str]:
        """Unique chain identifiers sorted by code point."""
        return sorted({record.chain for record in records})

    def summarize(self, records: Sequence[AtomRecord]) -> ProteinSummary:
        """
        Count atoms, backbone residues and chains.

        Args:
            records: Full list of decoded atoms

        Returns:
            ProteinSummary for the records
        """
        return ProteinSummary(
            total_atom_count=len(records),
            backbone_residue_count=len(self.select_backbone(records)),
            chains=tuple(self.distinct_chains(records)),
        )

    def chain_sequences(self, records: Sequence[AtomRecord]) -> Dict[str, str]:
        """
        One-letter sequence of each chain, read from its backbone atoms.

        Residue codes Biopython does not know become 'X'.

        Args:
            records: Decoded atoms, in file order

        Returns:
            Mapping of chain identifier to sequence, chains in sorted order
        """
        sequences: Dict[str, List[str]] = {
            chain: [] for chain in self.distinct_chains(records)
        }
        for record in self.select_backbone(records):
            sequences[record.chain].append(seq1(record.residue) or "X")
        return {chain: "".join(letters) for chain, letters in sequences.items()}
