"""Pipeline from raw PDB text to the data a viewer draws."""

import logging
from typing import Optional

from .domain.models.trace_result import TraceResult
from .io.pdb_decoder import PDBDecoder
from .services.geometry_service import GeometryService
from .services.selection_service import SelectionService

logger = logging.getLogger(__name__)


class TracePipeline:
    """Decode, select, recenter and measure a structure."""

    def __init__(
        self,
        decoder: Optional[PDBDecoder] = None,
        selection_service: Optional[SelectionService] = None,
        geometry_service: Optional[GeometryService] = None,
    ):
        """Initialize with optional service overrides."""
        self.decoder = decoder or PDBDecoder()
        self.selection = selection_service or SelectionService()
        self.geometry = geometry_service or GeometryService()

    def run(
        self,
        text: str,
        source: str = "<text>",
        chain_id: Optional[str] = None,
        backbone_only: bool = True,
        center: bool = True,
    ) -> TraceResult:
        """
        Process the contents of one PDB file.

        The summary always describes the whole file; the drawn atoms and
        the geometry follow the chain and backbone selection.

        Args:
            text: Contents of a PDB file
            source: Label for the structure, usually its path
            chain_id: Optional chain to keep
            backbone_only: Keep only alpha carbons
            center: Translate the drawn atoms to the origin

        Returns:
            TraceResult for the structure
        """
        decoded = self.decoder.decode_with_issues(text)
        records = decoded.records
        logger.info(f"{source}: parsed {len(records)} atoms")
        if decoded.has_issues:
            logger.warning(
                f"{source}: {len(decoded.issues)} numeric field(s) marked missing"
            )

        summary = self.selection.summarize(records)

        atoms = records
        if chain_id is not None:
            atoms = self.selection.select_by_chain(atoms, chain_id)
            if not atoms:
                logger.warning(
                    f"{source}: no atoms in chain '{chain_id}', "
                    f"available chains {list(summary.chains)}"
                )
        if backbone_only:
            atoms = self.selection.select_backbone(atoms)
            logger.info(f"{source}: found {len(atoms)} backbone (CA) atoms")

        offset = None
        if center:
            offset = self.geometry.centroid(atoms)
            atoms = list(self.geometry.recenter(atoms, center=offset))

        box = self.geometry.bounding_box(atoms)
        extent = self.geometry.box_extent(box)
        if atoms and extent is None:
            logger.warning(
                f"{source}: max extent is missing, using default camera distance"
            )

        return TraceResult(
            source=source,
            atoms=atoms,
            summary=summary,
            bounding_box=box,
            max_extent=extent,
            camera_distance=self.geometry.distance_for_extent(
                extent if atoms else None
            ),
            offset=offset,
            issues=decoded.issues,
            sequences=self.selection.chain_sequences(records),
        )
