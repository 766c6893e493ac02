"""Tests for the Mesh container."""

import numpy as np
import pytest

from luxolamp.core.material import GLOW_MATERIAL, HIGHLIGHT_MATERIAL, Material
from luxolamp.core.mesh import Mesh, Topology


def _square_strip():
    positions = [[0, 0, 0], [0, 1, 0], [1, 0, 0], [1, 1, 0]]
    normals = [[0, 0, 1]] * 4
    return Mesh(positions, normals, Topology.TRIANGLE_STRIP)


def test_arrays_are_float32_and_read_only():
    mesh = _square_strip()
    assert mesh.positions.dtype == np.float32
    assert mesh.positions.shape == (4, 3)
    with pytest.raises(ValueError):
        mesh.positions[0, 0] = 5.0


def test_default_range_covers_all_vertices():
    assert _square_strip().ranges == ((0, 4),)


def test_shape_mismatch():
    with pytest.raises(ValueError):
        Mesh([[0, 0, 0]], [[0, 0, 1], [0, 0, 1]], Topology.LINES)


def test_strip_triangles():
    tris = _square_strip().triangles()
    assert tris.shape == (2, 3, 3)


def test_line_segments_of_loop_close_the_loop():
    mesh = Mesh(
        [[0, 0, 0], [1, 0, 0], [1, 1, 0]], [[0, 0, 1]] * 3, Topology.LINE_LOOP,
    )
    segs = mesh.line_segments()
    assert mesh.line_segment_count == 3
    assert segs.shape == (3, 2, 3)
    np.testing.assert_array_equal(segs[-1], [[1, 1, 0], [0, 0, 0]])


def test_line_strip_ranges():
    pts = np.zeros((6, 3))
    mesh = Mesh(pts, pts, Topology.LINE_STRIP, ranges=((0, 3), (3, 3)))
    assert mesh.line_segment_count == 4
    assert mesh.line_segments().shape == (4, 2, 3)


def test_surface_has_no_segments():
    with pytest.raises(ValueError):
        _square_strip().line_segments()
    assert _square_strip().line_segment_count == 0


def test_lines_have_no_triangles():
    pts = np.zeros((2, 3))
    with pytest.raises(ValueError):
        Mesh(pts, pts, Topology.LINES).triangles()


def test_topology_is_line():
    assert Topology.LINE_LOOP.is_line
    assert not Topology.QUAD_STRIP.is_line


def test_material_transparency():
    assert not Material().transparent
    assert GLOW_MATERIAL.transparent
    assert not HIGHLIGHT_MATERIAL.lit
