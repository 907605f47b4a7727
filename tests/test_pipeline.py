"""Tests for the decode, select and measure pipeline."""

import json
import numpy as np
import pytest
from pathlib import Path

from proteintrace.pipeline import TracePipeline
from proteintrace.services.geometry_service import GeometryService

TWO_CHAINS_PDB = Path(__file__).parent / "test_data" / "input" / "two_chains.pdb"


class CountingGeometryService(GeometryService):
    """Geometry service recording how often each aggregate is computed."""

    def __init__(self):
        self.calls = {"centroid": 0, "bounding_box": 0}

    def centroid(self, records):
        self.calls["centroid"] += 1
        return super().centroid(records)

    def bounding_box(self, records):
        self.calls["bounding_box"] += 1
        return super().bounding_box(records)


@pytest.fixture
def pdb_text():
    """Fixture providing the two chain PDB text."""
    return TWO_CHAINS_PDB.read_text()


@pytest.fixture
def pipeline():
    """Fixture providing a pipeline with default services."""
    return TracePipeline()


def test_default_run(pipeline, pdb_text):
    """Test the default backbone, recentered run."""
    result = pipeline.run(pdb_text, source="two_chains.pdb")

    assert result.summary.total_atom_count == 10
    assert result.summary.backbone_residue_count == 4
    assert result.summary.chains == ("A", "B")
    assert len(result.atoms) == 4
    assert result.offset == pytest.approx((0.5, 1.0, 3.0))
    coords = np.array([atom.position for atom in result.atoms])
    np.testing.assert_allclose(coords.mean(axis=0), 0.0, atol=1e-9)
    assert result.bounding_box.size == pytest.approx((8.0, 6.0, 4.0))
    assert result.max_extent == pytest.approx(8.0)
    assert result.camera_distance == 30.0
    assert result.sequences == {"A": "MK", "B": "GW"}
    assert result.issues == []


def test_each_aggregate_computed_once(pdb_text):
    """Test that the centroid and bounding box are each computed in one pass."""
    geometry = CountingGeometryService()
    result = TracePipeline(geometry_service=geometry).run(pdb_text)

    assert geometry.calls == {"centroid": 1, "bounding_box": 1}
    assert result.max_extent == pytest.approx(8.0)
    assert result.camera_distance == 30.0


def test_chain_selection_keeps_full_summary(pipeline, pdb_text):
    """Test that chain selection narrows the atoms but not the summary."""
    result = pipeline.run(pdb_text, chain_id="B")

    assert [atom.serial for atom in result.atoms] == [9, 10]
    assert result.summary.total_atom_count == 10


def test_all_atoms_without_centering(pipeline, pdb_text):
    """Test a run keeping every atom at its file position."""
    result = pipeline.run(pdb_text, backbone_only=False, center=False)

    assert len(result.atoms) == 10
    assert result.offset is None
    assert result.atoms[0].position == (1.0, 2.0, 3.0)
    assert result.bounding_box.min == pytest.approx((-3.0, -2.0, -4.0))


def test_unknown_chain_gives_degenerate_geometry(pipeline, pdb_text, caplog):
    """Test that an absent chain gives empty geometry and a warning."""
    with caplog.at_level("WARNING", logger="proteintrace"):
        result = pipeline.run(pdb_text, chain_id="Q")

    assert result.atoms == []
    assert result.max_extent == 0.0
    assert result.camera_distance == 50.0
    assert result.offset is None
    assert "no atoms in chain 'Q'" in caplog.text


def test_empty_text(pipeline):
    """Test that empty text gives an empty result."""
    result = pipeline.run("")

    assert result.summary.total_atom_count == 0
    assert result.summary.chains == ()
    assert result.atoms == []
    assert result.bounding_box.size == (0.0, 0.0, 0.0)


def test_issues_are_reported(pipeline, pdb_text, caplog):
    """Test that a malformed coordinate is reported and falls back to the default distance."""
    broken = pdb_text.replace("   5.000   4.000", "   5.000   x.xxx")
    with caplog.at_level("WARNING", logger="proteintrace"):
        result = pipeline.run(broken)

    assert len(result.issues) == 1
    assert result.issues[0].field_name == "y"
    assert result.max_extent is None
    assert result.bounding_box.size[1] is None
    assert result.camera_distance == 50.0
    assert "max extent is missing" in caplog.text


def test_to_dict_is_json_serialisable(pipeline, pdb_text):
    """Test that the result dictionary survives a JSON round trip."""
    payload = json.loads(json.dumps(pipeline.run(pdb_text, source="x.pdb").to_dict()))

    assert payload["source"] == "x.pdb"
    assert payload["chains"] == ["A", "B"]
    assert payload["drawn_atoms"] == 4
    assert payload["bounding_box"]["size"] == pytest.approx([8.0, 6.0, 4.0])
