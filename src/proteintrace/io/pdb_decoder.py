# src/proteintrace/io/pdb_decoder.py
"""Decoder turning fixed-column PDB text into atom records."""

import logging
import math
from pathlib import Path
from typing import Callable, List, Optional, Union

from ..constants import (
    ATOM_NAME_COLUMNS,
    ATOM_RECORD_KEYWORDS,
    CHAIN_ID_COLUMNS,
    ELEMENT_COLUMNS,
    HETATM_RECORD,
    RESIDUE_NAME_COLUMNS,
    RESIDUE_SEQUENCE_COLUMNS,
    SERIAL_COLUMNS,
    X_COLUMNS,
    Y_COLUMNS,
    Z_COLUMNS,
)
from ..domain.models.atom_record import AtomRecord
from ..domain.models.decode_result import DecodeIssue, DecodeResult

logger = logging.getLogger(__name__)


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text)
    except ValueError:
        return None


def _parse_float(text: str) -> Optional[float]:
    try:
        value = float(text)
    except ValueError:
        return None
    # nan/inf spell a number but carry no position
    return value if math.isfinite(value) else None


class PDBDecoder:
    """Decodes ATOM and HETATM records of a PDB file.

    Decoding is line-local and best-effort: a malformed numeric field
    becomes None and is reported as a DecodeIssue, other lines are skipped.
    """

    @staticmethod
    def is_atom_line(line: str) -> bool:
        """Check whether a line is an ATOM or HETATM record."""
        return line.startswith(ATOM_RECORD_KEYWORDS)

    @staticmethod
    def decode_line(
        line: str, line_number: int = 0, issues: Optional[List[DecodeIssue]] = None
    ) -> AtomRecord:
        """
        Decode a single atom record line.

        A numeric field whose columns run past the end of a short line is
        missing, even if some of its digits are present.

        Args:
            line: ATOM or HETATM record
            line_number: 1-based line number used when reporting issues
            issues: Optional list collecting fields that could not be parsed

        Returns:
            AtomRecord with None for each unparseable numeric field
        """

        def numeric(field_name: str, columns: slice, parse: Callable):
            raw = line[columns].strip()
            # a field cut short by the end of the line is missing
            value = parse(raw) if len(line) >= columns.stop else None
            if value is None and issues is not None:
                issues.append(DecodeIssue(line_number, field_name, raw))
            return value

        return AtomRecord(
            serial=numeric("serial", SERIAL_COLUMNS, _parse_int),
            name=line[ATOM_NAME_COLUMNS].strip(),
            residue=line[RESIDUE_NAME_COLUMNS].strip(),
            chain=line[CHAIN_ID_COLUMNS].strip(),
            residue_sequence=numeric(
                "residue_sequence", RESIDUE_SEQUENCE_COLUMNS, _parse_int
            ),
            position=(
                numeric("x", X_COLUMNS, _parse_float),
                numeric("y", Y_COLUMNS, _parse_float),
                numeric("z", Z_COLUMNS, _parse_float),
            ),
            element=line[ELEMENT_COLUMNS].strip(),
            hetero=line.startswith(HETATM_RECORD),
        )

    @classmethod
    def decode_with_issues(cls, text: str) -> DecodeResult:
        """
        Decode PDB text and report every numeric field marked missing.

        Args:
            text: Full contents of a PDB file

        Returns:
            DecodeResult with records in file order and the collected issues
        """
        result = DecodeResult()
        for line_number, line in enumerate(text.split("\n"), start=1):
            line = line.rstrip("\r")
            if not cls.is_atom_line(line):
                continue
            result.records.append(cls.decode_line(line, line_number, result.issues))
        return result

    @classmethod
    def decode(cls, text: str) -> List[AtomRecord]:
        """
        Decode PDB text into atom records, preserving file order.

        Args:
            text: Full contents of a PDB file

        Returns:
            List of AtomRecord, empty when the text holds no atom records
        """
        result = cls.decode_with_issues(text)
        if result.has_issues:
            logger.warning(
                f"{len(result.issues)} numeric field(s) could not be parsed "
                f"and were marked missing (first at line {result.issues[0].line_number})"
            )
        return result.records

    @classmethod
    def decode_file(
        cls, path: Union[str, Path], encoding: str = "utf-8", errors: str = "replace"
    ) -> List[AtomRecord]:
        """
        Read and decode a PDB file from disk.

        Args:
            path: Path to the PDB file
            encoding: Text encoding of the file
            errors: How undecodable bytes are handled, replaced by default so
                that stray bytes outside the atom columns do not abort reading

        Returns:
            List of AtomRecord

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(path)
        logger.info(f"Decoding {path}")
        return cls.decode(path.read_text(encoding=encoding, errors=errors))
