"""Models describing the outcome of decoding PDB text."""

from dataclasses import dataclass, field
from typing import List

from .atom_record import AtomRecord


@dataclass(frozen=True)
class DecodeIssue:
    """A numeric field that could not be parsed and was marked missing."""

    line_number: int
    field_name: str
    raw: str


@dataclass
class DecodeResult:
    """Decoded atom records along with any field-level issues."""

    records: List[AtomRecord] = field(default_factory=list)
    issues: List[DecodeIssue] = field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        return bool(self.issues)
