"""Services operating on decoded atom records."""

from .selection_service import SelectionService
from .geometry_service import GeometryService

__all__ = ["SelectionService", "GeometryService"]
