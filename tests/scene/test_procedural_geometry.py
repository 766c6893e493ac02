"""Tests for procedural mesh builders."""

import numpy as np
import pytest

from luxolamp.core.mesh import Topology
from luxolamp.scene.procedural_geometry import (
    make_cone, make_cylinder, make_disk, make_grid,
    make_uv_sphere, make_wire_cube, make_wire_sphere,
)


def _assert_unit_normals(mesh):
    lengths = np.linalg.norm(mesh.normals.astype(np.float64), axis=1)
    np.testing.assert_allclose(lengths, 1.0, atol=1e-5)


@pytest.mark.parametrize("slices", [3, 16, 32])
def test_cylinder_vertex_count(slices):
    mesh = make_cylinder(0.15, 3.0, slices)
    assert mesh.vertex_count == 2 * (slices + 1)
    assert mesh.topology == Topology.QUAD_STRIP


def test_cylinder_geometry():
    mesh = make_cylinder(0.5, 2.0, 16)
    radial = np.linalg.norm(mesh.positions[:, :2], axis=1)
    np.testing.assert_allclose(radial, 0.5, atol=1e-6)
    np.testing.assert_allclose(np.unique(mesh.positions[:, 2]), [0.0, 2.0])
    np.testing.assert_allclose(mesh.normals[:, 2], 0.0, atol=1e-7)
    _assert_unit_normals(mesh)


def test_cone_slant_normal():
    base_r, top_r, h = 0.32, 0.8, 1.2
    mesh = make_cone(base_r, top_r, h, 32)
    assert mesh.vertex_count == 2 * 33
    _assert_unit_normals(mesh)
    slant = np.hypot(base_r - top_r, h)
    np.testing.assert_allclose(mesh.normals[:, 2], (base_r - top_r) / slant, atol=1e-6)


def test_flat_cone_faces_up():
    mesh = make_cone(1.0, 0.4, 0.0, 8)
    np.testing.assert_allclose(mesh.normals, np.tile([0.0, 0.0, 1.0], (mesh.vertex_count, 1)), atol=1e-6)


def test_cone_seam_is_closed():
    mesh = make_cone(1.0, 0.5, 1.0, 8)
    np.testing.assert_allclose(mesh.positions[:2], mesh.positions[-2:], atol=1e-6)


@pytest.mark.parametrize("slices, stacks", [(16, 16), (8, 4)])
def test_sphere_counts(slices, stacks):
    mesh = make_uv_sphere(0.225, slices, stacks)
    assert mesh.vertex_count == stacks * 2 * (slices + 1)
    assert len(mesh.ranges) == stacks
    assert all(count == 2 * (slices + 1) for _, count in mesh.ranges)


def test_sphere_surface():
    mesh = make_uv_sphere(2.0, 16, 16)
    _assert_unit_normals(mesh)
    np.testing.assert_allclose(np.linalg.norm(mesh.positions, axis=1), 2.0, atol=1e-5)
    np.testing.assert_allclose(mesh.positions / 2.0, mesh.normals, atol=1e-6)


@pytest.mark.parametrize("inner", [0.0, 0.2])
def test_disk(inner):
    mesh = make_disk(inner, 0.8, 32)
    assert mesh.vertex_count == 2 * 33
    assert mesh.topology == Topology.TRIANGLE_STRIP
    assert np.all(mesh.normals == np.array([0.0, 0.0, 1.0], dtype=np.float32))
    np.testing.assert_allclose(mesh.positions[:, 2], 0.0)
    radial = np.linalg.norm(mesh.positions[:, :2], axis=1)
    np.testing.assert_allclose(radial[0::2], inner, atol=1e-6)
    np.testing.assert_allclose(radial[1::2], 0.8, atol=1e-6)


def test_wire_cube():
    mesh = make_wire_cube(2.2)
    assert mesh.vertex_count == 24
    assert mesh.topology == Topology.LINES
    assert mesh.line_segment_count == 12
    np.testing.assert_allclose(np.abs(mesh.positions), 1.1, atol=1e-6)
    segs = mesh.line_segments()
    lengths = np.linalg.norm(segs[:, 1] - segs[:, 0], axis=1)
    np.testing.assert_allclose(lengths, 2.2, atol=1e-6)


def test_wire_sphere():
    latitudes, longitudes = make_wire_sphere(0.375, 16, 16)
    assert latitudes.topology == Topology.LINE_LOOP
    assert longitudes.topology == Topology.LINE_STRIP
    assert latitudes.vertex_count == 17 * 16
    assert longitudes.vertex_count == 16 * 17
    assert len(latitudes.ranges) == 17
    assert len(longitudes.ranges) == 16
    for mesh in (latitudes, longitudes):
        np.testing.assert_allclose(np.linalg.norm(mesh.positions, axis=1), 0.375, atol=1e-6)
        _assert_unit_normals(mesh)


def test_grid():
    mesh = make_grid(10.0, 0.5)
    assert mesh.topology == Topology.TRIANGLES
    assert mesh.vertex_count == 40 * 40 * 6
    np.testing.assert_allclose(mesh.positions[:, 1], 0.0)
    assert mesh.positions[:, 0].min() == pytest.approx(-10.0)
    assert mesh.positions[:, 2].max() == pytest.approx(10.0)
    assert np.all(mesh.normals == np.array([0.0, 1.0, 0.0], dtype=np.float32))


def test_builders_are_pure():
    a = make_uv_sphere(1.0, 8, 8)
    b = make_uv_sphere(1.0, 8, 8)
    np.testing.assert_array_equal(a.positions, b.positions)
