"""
Colour lookups for residues and chains.

Colours are 24-bit RGB integers (0xRRGGBB) as consumed by the renderer.
Unknown residues and chains fall back to a neutral grey.
"""

from types import MappingProxyType
from typing import Mapping

from .models.atom_record import AtomRecord

HYDROPHOBIC_COLOR = 0xFFA500
POLAR_COLOR = 0x00FF00
POSITIVE_COLOR = 0x0000FF
HISTIDINE_COLOR = 0x8080FF
NEGATIVE_COLOR = 0xFF0000

DEFAULT_RESIDUE_COLOR = 0x808080
DEFAULT_CHAIN_COLOR = 0x95A5A6

RESIDUE_COLORS: Mapping[str, int] = MappingProxyType(
    {
        **{
            code: HYDROPHOBIC_COLOR
            for code in ("ALA", "VAL", "LEU", "ILE", "MET", "PHE", "TRP", "PRO", "GLY")
        },
        **{code: POLAR_COLOR for code in ("SER", "THR", "TYR", "ASN", "GLN", "CYS")},
        "LYS": POSITIVE_COLOR,
        "ARG": POSITIVE_COLOR,
        "HIS": HISTIDINE_COLOR,
        "ASP": NEGATIVE_COLOR,
        "GLU": NEGATIVE_COLOR,
    }
)

CHAIN_COLORS: Mapping[str, int] = MappingProxyType(
    {
        "A": 0x3498DB,  # blue
        "B": 0xE74C3C,  # red
        "C": 0x2ECC71,  # green
        "D": 0xF39C12,  # orange
        "E": 0x9B59B6,  # purple
        "F": 0x1ABC9C,  # teal
        "G": 0xE91E63,  # pink
        "H": 0x00BCD4,  # cyan
        "I": 0xFF5722,  # deep orange
        "J": 0x795548,  # brown
    }
)

COLOR_SCHEMES = ("residue", "chain")


def residue_color(residue_name: str) -> int:
    """Colour of a three-letter residue code, grey if unknown."""
    return RESIDUE_COLORS.get(residue_name, DEFAULT_RESIDUE_COLOR)


def chain_color(chain_id: str) -> int:
    """Colour of a chain identifier, grey if unknown."""
    return CHAIN_COLORS.get(chain_id, DEFAULT_CHAIN_COLOR)


def atom_color(record: AtomRecord, scheme: str = "residue") -> int:
    """
    Colour an atom according to a colour scheme.

    Args:
        record: Atom to colour
        scheme: Either "residue" or "chain"

    Returns:
        RGB colour as an integer

    Raises:
        ValueError: If the scheme is not recognised
    """
    if scheme == "residue":
        return residue_color(record.residue)
    if scheme == "chain":
        return chain_color(record.chain)
    raise ValueError(f"Unknown colour scheme '{scheme}', expected one of {COLOR_SCHEMES}")


def to_hex(color: int) -> str:
    """Format an RGB integer as '#rrggbb'."""
    return f"#{color:06x}"
