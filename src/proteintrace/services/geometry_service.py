# src/proteintrace/services/geometry_service.py
"""Service deriving viewport geometry from atom records."""

import logging
from dataclasses import replace
from typing import List, Optional, Sequence

import numpy as np

from ..constants import BACKBONE_MARKER
from ..domain.models.atom_record import AtomRecord, Position
from ..domain.models.bounding_box import BoundingBox

logger = logging.getLogger(__name__)


def _coordinate_matrix(records: Sequence[AtomRecord]) -> np.ndarray:
    """Stack positions into an (n, 3) array with NaN for missing values."""
    return np.array(
        [
            [np.nan if value is None else value for value in record.position]
            for record in records
        ],
        dtype=float,
    ).reshape(-1, 3)


def _mask_missing(values: np.ndarray, missing: np.ndarray) -> Position:
    return tuple(
        None if is_missing else float(value)
        for value, is_missing in zip(values, missing)
    )


def _format_position(position: Position) -> str:
    return ", ".join("missing" if v is None else f"{v:.2f}" for v in position)


class GeometryService:
    """
    Centroid, bounding box and backbone trace of a set of atoms.

    Missing coordinates are never repaired: an aggregate over an axis with
    a missing coordinate is itself None on that axis.
    """

    def centroid(self, records: Sequence[AtomRecord]) -> Optional[Position]:
        """
        Arithmetic mean position of the records.

        Args:
            records: Atoms to average

        Returns:
            Per-axis mean, or None when there are no records
        """
        if not records:
            return None
        coords = _coordinate_matrix(records)
        missing = np.isnan(coords).any(axis=0)
        return _mask_missing(coords.mean(axis=0), missing)

    def recenter(
        self, records: Sequence[AtomRecord], center: Optional[Position] = None
    ) -> Sequence[AtomRecord]:
        """
        Translate records so their centroid sits at the origin.

        The input records are left untouched; each returned record is a
        copy with a new position. Empty input is returned as is.

        Args:
            records: Atoms to translate
            center: Centroid of the records if the caller already has it

        Returns:
            New list of translated records in the same order
        """
        if not records:
            return records

        if center is None:
            center = self.centroid(records)
        logger.debug(f"Centering structure: offset ({_format_position(center)})")

        centered = []
        for record in records:
            position = tuple(
                None if value is None or offset is None else value - offset
                for value, offset in zip(record.position, center)
            )
            centered.append(replace(record, position=position))
        return centered

    def bounding_box(self, records: Sequence[AtomRecord]) -> BoundingBox:
        """
        Axis-aligned bounding box of the records.

        Args:
            records: Atoms to enclose

        Returns:
            BoundingBox, all zero for empty input
        """
        if not records:
            return BoundingBox.empty()

        coords = _coordinate_matrix(records)
        missing = np.isnan(coords).any(axis=0)
        lower = coords.min(axis=0)
        upper = coords.max(axis=0)
        return BoundingBox(
            min=_mask_missing(lower, missing),
            max=_mask_missing(upper, missing),
            size=_mask_missing(upper - lower, missing),
        )

    @staticmethod
    def box_extent(box: BoundingBox) -> Optional[float]:
        """Largest side of an already computed box, None if any axis is missing."""
        if not box.is_complete:
            return None
        return max(box.size)

    def max_extent(self, records: Sequence[AtomRecord]) -> Optional[float]:
        """
        Largest side of the bounding box.

        Returns:
            Largest size component, None if any axis is missing
        """
        return self.box_extent(self.bounding_box(records))

    @staticmethod
    def distance_for_extent(
        extent: Optional[float],
        scale: float = 2.0,
        minimum: float = 30.0,
        default: float = 50.0,
    ) -> float:
        """
        Viewing distance for a known max extent.

        Args:
            extent: Max extent, None when it is missing or there are no atoms
            scale: Multiple of the max extent to step back
            minimum: Closest allowed distance
            default: Distance used when the extent is None

        Returns:
            Camera distance in the file's length unit

        Raises:
            ValueError: If scale is not positive
        """
        if scale <= 0:
            raise ValueError(f"Scale must be positive, got {scale}")
        if extent is None:
            return default
        return max(minimum, extent * scale)

    def camera_distance(
        self,
        records: Sequence[AtomRecord],
        scale: float = 2.0,
        minimum: float = 30.0,
        default: float = 50.0,
    ) -> float:
        """
        Viewing distance proportional to the size of the structure.

        Args:
            records: Atoms to fit in view
            scale: Multiple of the max extent to step back
            minimum: Closest allowed distance
            default: Distance used for empty input or a missing extent

        Returns:
            Camera distance in the file's length unit

        Raises:
            ValueError: If scale is not positive
        """
        extent = self.max_extent(records) if records else None
        if records and extent is None:
            logger.warning("Max extent is missing, using default camera distance")
        return self.distance_for_extent(extent, scale, minimum, default)

    def backbone_trace(
        self, records: Sequence[AtomRecord], split_chains: bool = False
    ) -> List[np.ndarray]:
        """
        Polylines through the alpha carbons, in record order.

        An alpha carbon with a missing coordinate is left out and breaks the
        polyline there, so its neighbours are not joined.

        Args:
            records: Atoms to trace, typically already recentered
            split_chains: Start a new polyline whenever the chain changes

        Returns:
            List of (n, 3) float arrays, empty when there is no backbone
        """
        segments: List[List[AtomRecord]] = [[]]
        previous: Optional[AtomRecord] = None
        dropped = 0
        for record in records:
            if record.name != BACKBONE_MARKER:
                continue
            if not record.is_complete:
                dropped += 1
                segments.append([])
                previous = None
                continue
            if split_chains and previous is not None and record.chain != previous.chain:
                segments.append([])
            segments[-1].append(record)
            previous = record

        if dropped:
            logger.debug(
                f"Dropped {dropped} backbone atom(s) with missing coordinates from trace"
            )
        return [_coordinate_matrix(segment) for segment in segments if segment]
