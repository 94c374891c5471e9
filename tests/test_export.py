"""Tests for STL export."""

import numpy as np
import pytest

from fracsurf import generate_surface, save_stl, to_stl


def facets(blob):
    lines = blob.decode("ascii").splitlines()
    return [line.split()[2:] for line in lines if line.strip().startswith("facet normal")]


class TestToStl:
    """Tests for ASCII STL triangulation."""

    def test_header_and_footer(self):
        """Test the solid name in the first and last lines."""
        lines = to_stl(np.zeros((3, 3)), 1.0, 1.0, name="plate").decode("ascii").splitlines()
        assert lines[0] == "solid plate"
        assert lines[-1] == "endsolid plate"

    def test_facet_count(self):
        """Test two facets per grid cell."""
        blob = to_stl(np.zeros((4, 6)), 2.0, 1.0)
        assert len(facets(blob)) == 2 * 3 * 5

    def test_normals_point_up(self):
        """Test that a flat field has +z facet normals."""
        for normal in facets(to_stl(np.zeros((3, 4)), 3.0, 2.0)):
            nx, ny, nz = map(float, normal)
            assert nx == 0 and ny == 0
            assert nz > 0

    def test_vertices_centred(self):
        """Test that vertices span [-L/2, L/2] and carry the heights."""
        field = np.array([[0.0, 1.0], [2.0, 3.0]])
        text = to_stl(field, 2.0, 4.0).decode("ascii")
        vertices = np.array(
            [list(map(float, line.split()[1:])) for line in text.splitlines() if "vertex" in line]
        )
        assert vertices.shape == (6, 3)
        np.testing.assert_allclose(vertices[:, 0].min(), -1.0)
        np.testing.assert_allclose(vertices[:, 0].max(), 1.0)
        np.testing.assert_allclose(vertices[:, 1].min(), -2.0)
        np.testing.assert_allclose(vertices[:, 1].max(), 2.0)
        # First triangle: p00, p10, p11
        np.testing.assert_allclose(vertices[:3], [[-1, -2, 0], [1, -2, 1], [1, 2, 3]])

    def test_generated_surface(self):
        """Test export of a generated surface."""
        surface = generate_surface(nx=8, ny=8, L=0.1, seed=3)
        blob = to_stl(surface.field, 0.1, 0.1)
        assert len(facets(blob)) == 2 * 7 * 7

    def test_too_small(self):
        """Test that grids smaller than 2x2 raise error."""
        with pytest.raises(ValueError):
            to_stl(np.zeros((1, 4)), 1.0, 1.0)

    def test_save(self, tmp_path):
        """Test writing to a file named after the solid."""
        path = save_stl(tmp_path / "rough.stl", np.zeros((2, 2)), 1.0, 1.0)
        assert path.read_text().startswith("solid rough\n")
