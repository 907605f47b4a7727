# src/proteintrace/infrastructure/structure_repository.py
"""Repository of PDB files stored in a directory."""

import logging
import os
from typing import Dict, List, Optional

from ..domain.models.atom_record import AtomRecord
from ..interfaces.repository import Repository
from ..io.pdb_decoder import PDBDecoder

logger = logging.getLogger(__name__)


class StructureRepository(Repository[List[AtomRecord]]):
    """Read-only access to decoded `<id>.pdb` files."""

    def __init__(self, data_dir: str):
        """
        Initialize repository with data directory.

        Args:
            data_dir: Directory containing structure files

        Raises:
            NotADirectoryError: If data_dir is not a directory
        """
        if not os.path.isdir(data_dir):
            raise NotADirectoryError(f"Structure directory {data_dir} not found")
        self._data_dir = data_dir
        self._decoder = PDBDecoder()
        self._cache: Dict[str, List[AtomRecord]] = {}

    def path_for(self, id: str) -> str:
        return os.path.join(self._data_dir, f"{id}.pdb")

    def get(self, id: str) -> Optional[List[AtomRecord]]:
        """
        Retrieve the decoded atoms of a structure by ID.

        Args:
            id: Structure identifier, the file name without '.pdb'

        Returns:
            List of AtomRecord, or None if no such file exists
        """
        if id in self._cache:
            return self._cache[id]

        file_path = self.path_for(id)
        if not os.path.exists(file_path):
            logger.debug(f"No structure file for id {id}")
            return None

        records = self._decoder.decode_file(file_path)
        self._cache[id] = records
        return records

    def list(self) -> List[str]:
        """
        List all available structure IDs.

        Returns:
            Sorted structure IDs
        """
        return sorted(
            os.path.splitext(file_name)[0]
            for file_name in os.listdir(self._data_dir)
            if file_name.endswith(".pdb")
        )
