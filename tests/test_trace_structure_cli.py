import json
from pathlib import Path

from proteintrace.presentation.cli.trace_structure import main, setup_parser

TWO_CHAINS_PDB = Path(__file__).parent / "test_data" / "input" / "two_chains.pdb"


def test_parser_defaults():
    """Test the parser defaults for a single path."""
    args = setup_parser().parse_args(["a.pdb"])

    assert args.paths == ["a.pdb"]
    assert args.chain is None
    assert args.color_scheme == "residue"
    assert not args.json


def test_text_report(capsys):
    """Test the human-readable report."""
    assert main([str(TWO_CHAINS_PDB)]) == 0
    out = capsys.readouterr().out

    assert "Total atoms:       10" in out
    assert "Backbone residues: 4" in out
    assert "A, B" in out
    assert "Max extent:        8.000" in out
    assert "Sequence A:" in out


def test_json_output_with_atoms(capsys):
    """Test JSON output listing atoms coloured by chain."""
    assert main([str(TWO_CHAINS_PDB), "--json", "--list-atoms", "--color-scheme", "chain"]) == 0
    payload = json.loads(capsys.readouterr().out)

    assert payload["backbone_residues"] == 4
    assert [atom["serial"] for atom in payload["atoms"]] == [2, 5, 9, 10]
    assert payload["atoms"][0]["color"] == "#3498db"
    assert payload["atoms"][2]["color"] == "#e74c3c"


def test_chain_and_no_center(capsys):
    """Test chain selection with the original coordinates kept."""
    assert main([str(TWO_CHAINS_PDB), "--json", "--chain", "A", "--no-center"]) == 0
    payload = json.loads(capsys.readouterr().out)

    assert payload["drawn_atoms"] == 2
    assert payload["offset"] is None
    assert payload["bounding_box"]["min"] == [2.0, 2.0, 3.0]


def test_missing_file(tmp_path, capsys):
    """Test that a missing file is reported and the next file still processed."""
    assert main([str(tmp_path / "absent.pdb"), str(TWO_CHAINS_PDB), "--json"]) == 1
    lines = capsys.readouterr().out.strip().splitlines()

    assert len(lines) == 1
    assert json.loads(lines[0])["total_atoms"] == 10


def test_latin1_remark_does_not_abort_batch(tmp_path, capsys):
    """Test that a file with a non UTF-8 byte is traced along with the next file."""
    latin1 = tmp_path / "latin1.pdb"
    latin1.write_bytes("REMARK   1 CAFÉ LAB\n".encode("latin-1") + TWO_CHAINS_PDB.read_bytes())

    assert main([str(latin1), str(TWO_CHAINS_PDB), "--json"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()

    assert len(lines) == 2
    assert [json.loads(line)["total_atoms"] for line in lines] == [10, 10]


def test_unreadable_file_is_skipped(tmp_path, capsys, monkeypatch):
    """Test that a read error on one file is reported and the batch continues."""
    broken = tmp_path / "broken.pdb"
    broken.write_text("")
    read_text = Path.read_text

    def failing_read_text(self, *args, **kwargs):
        if self == broken:
            raise PermissionError(13, "Permission denied", str(self))
        return read_text(self, *args, **kwargs)

    monkeypatch.setattr(Path, "read_text", failing_read_text)

    assert main([str(broken), str(TWO_CHAINS_PDB), "--json"]) == 1
    lines = capsys.readouterr().out.strip().splitlines()

    assert len(lines) == 1
    assert json.loads(lines[0])["total_atoms"] == 10
