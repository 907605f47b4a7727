"""Reading PDB text."""

from .pdb_decoder import PDBDecoder

__all__ = ["PDBDecoder"]
