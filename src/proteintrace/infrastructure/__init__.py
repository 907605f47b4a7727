"""Infrastructure layer for structure storage."""

from .structure_repository import StructureRepository

__all__ = ["StructureRepository"]
