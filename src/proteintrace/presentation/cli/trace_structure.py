# src/proteintrace/presentation/cli/trace_structure.py
"""Command-line interface for tracing the backbone of PDB structures."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from ...domain.color_schemes import COLOR_SCHEMES, atom_color, to_hex
from ...domain.models.trace_result import TraceResult
from ...pipeline import TracePipeline


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Set up logging configuration.

    Args:
        verbose: Whether to enable verbose logging

    Returns:
        Configured package logger
    """
    logger = logging.getLogger("proteintrace")
    logger.setLevel(logging.INFO if verbose else logging.WARNING)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(handler)

    return logger


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Trace the CA backbone of PDB structures and report its geometry"
    )
    parser.add_argument("paths", nargs="+", help="PDB files to process")
    parser.add_argument("--chain", help="Only draw atoms of this chain")
    parser.add_argument(
        "--all-atoms",
        action="store_true",
        help="Measure every atom instead of only the alpha carbons",
    )
    parser.add_argument(
        "--no-center",
        action="store_true",
        help="Keep the original coordinates instead of centering at the origin",
    )
    parser.add_argument(
        "--list-atoms",
        action="store_true",
        help="Print every drawn atom with its colour",
    )
    parser.add_argument(
        "--color-scheme",
        choices=COLOR_SCHEMES,
        default="residue",
        help="Colouring used with --list-atoms",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON output")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")
    return parser


def _format_triple(values) -> str:
    return "(" + ", ".join("missing" if v is None else f"{v:.3f}" for v in values) + ")"


def format_report(
    result: TraceResult, list_atoms: bool = False, color_scheme: str = "residue"
) -> str:
    """Render a TraceResult as human-readable text."""
    summary = result.summary
    box = result.bounding_box
    extent = "missing" if result.max_extent is None else f"{result.max_extent:.3f}"
    lines = [
        f"Structure: {result.source}",
        f"  Total atoms:       {summary.total_atom_count}",
        f"  Backbone residues: {summary.backbone_residue_count}",
        f"  Chains ({summary.chain_count}):        {', '.join(summary.chains) or '-'}",
        f"  Drawn atoms:       {len(result.atoms)}",
        f"  Bounding box min:  {_format_triple(box.min)}",
        f"  Bounding box max:  {_format_triple(box.max)}",
        f"  Size:              {_format_triple(box.size)}",
        f"  Max extent:        {extent}",
        f"  Camera distance:   {result.camera_distance:.3f}",
    ]
    if result.offset is not None:
        lines.append(f"  Centering offset:  {_format_triple(result.offset)}")
    for chain, sequence in result.sequences.items():
        if sequence:
            lines.append(f"  Sequence {chain or '-'}:        {sequence}")
    if result.issues:
        lines.append(f"  Decode issues:     {len(result.issues)}")
    if list_atoms:
        for atom in result.atoms:
            lines.append(
                f"    {atom.chain or '-':>1} {atom.residue:<3} "
                f"{'' if atom.residue_sequence is None else atom.residue_sequence:>4} "
                f"{atom.name:<4} {_format_triple(atom.position)} "
                f"{to_hex(atom_color(atom, color_scheme))}"
            )
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the backbone trace CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    logger = setup_logging(args.verbose)

    pipeline = TracePipeline()
    exit_code = 0

    paths = [Path(p) for p in args.paths]
    iterator = tqdm(paths, desc="Tracing structures") if len(paths) > 1 else paths
    for path in iterator:
        if not path.is_file():
            logger.error(f"Structure file {path} not found")
            exit_code = 1
            continue

        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.error(f"Could not read {path}: {e}")
            exit_code = 1
            continue

        result = pipeline.run(
            text,
            source=str(path),
            chain_id=args.chain,
            backbone_only=not args.all_atoms,
            center=not args.no_center,
        )

        if args.json:
            payload = result.to_dict()
            if args.list_atoms:
                payload["atoms"] = [
                    {
                        "serial": atom.serial,
                        "name": atom.name,
                        "residue": atom.residue,
                        "chain": atom.chain,
                        "residue_sequence": atom.residue_sequence,
                        "position": list(atom.position),
                        "color": to_hex(atom_color(atom, args.color_scheme)),
                    }
                    for atom in result.atoms
                ]
            print(json.dumps(payload))
        else:
            print(format_report(result, args.list_atoms, args.color_scheme))

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
