"""Procedural mesh builders for the lamp's primitive shapes.

All functions are pure and return :class:`Mesh` with positions + normals
and a topology tag. Surfaces of revolution run along +Z from z=0, so a
segment is stood upright by its placement transform, not here.
``slices``/``stacks`` are expected to be at least 3.
"""

import math

import numpy as np

from luxolamp.core.mesh import Mesh, Topology


def _sweep(slices: int) -> np.ndarray:
    """Angles 0..2pi inclusive in ``slices`` steps (the seam is repeated)."""
    return 2.0 * np.pi * np.arange(slices + 1) / slices


def _ring_pairs(first: np.ndarray, second: np.ndarray) -> np.ndarray:
    """Interleave two (N, 3) rings as first[0], second[0], first[1], ..."""
    return np.stack([first, second], axis=1).reshape(-1, 3)


def make_disk(inner_radius: float, outer_radius: float, slices: int = 32) -> Mesh:
    """Flat annulus in the XY plane at z=0 (a filled disk when inner is 0).

    Triangle strip of inner/outer vertex pairs, normal +Z.
    """
    theta = _sweep(slices)
    c, s = np.cos(theta), np.sin(theta)
    zeros = np.zeros_like(theta)
    inner = np.column_stack([inner_radius * c, inner_radius * s, zeros])
    outer = np.column_stack([outer_radius * c, outer_radius * s, zeros])

    positions = _ring_pairs(inner, outer)
    normals = np.tile([0.0, 0.0, 1.0], (len(positions), 1))
    return Mesh(positions=positions, normals=normals, topology=Topology.TRIANGLE_STRIP)


def make_cylinder(radius: float, height: float, slices: int = 16) -> Mesh:
    """Open cylinder side from z=0 to z=height, radial normals."""
    return make_cone(radius, radius, height, slices)


def make_cone(
    base_radius: float, top_radius: float, height: float, slices: int = 32,
) -> Mesh:
    """Open (truncated) cone side from z=0 to z=height.

    The slant normal has a constant axial part ``d / len`` and radial
    part ``height / len`` where ``d = base_radius - top_radius`` and
    ``len = sqrt(d^2 + height^2)``. Equal radii with zero height have no
    slant and are not a valid cone.
    """
    d = base_radius - top_radius
    slant = math.sqrt(d * d + height * height)
    normal_z = d / slant
    normal_xy = height / slant

    theta = _sweep(slices)
    c, s = np.cos(theta), np.sin(theta)
    bottom = np.column_stack([base_radius * c, base_radius * s, np.zeros_like(theta)])
    top = np.column_stack([top_radius * c, top_radius * s, np.full_like(theta, height)])
    ring_normals = np.column_stack([normal_xy * c, normal_xy * s, np.full_like(theta, normal_z)])

    positions = _ring_pairs(bottom, top)
    normals = _ring_pairs(ring_normals, ring_normals)
    return Mesh(positions=positions, normals=normals, topology=Topology.QUAD_STRIP)


def _sphere_points(theta: np.ndarray, phi: np.ndarray) -> np.ndarray:
    """Unit sphere directions for broadcastable latitude/longitude arrays."""
    sin_t = np.sin(theta)
    return np.stack(np.broadcast_arrays(
        np.cos(phi) * sin_t,
        np.sin(phi) * sin_t,
        np.cos(theta),
    ), axis=-1)


def make_uv_sphere(radius: float, slices: int = 16, stacks: int = 16) -> Mesh:
    """Latitude/longitude sphere centred at the origin.

    Each of the ``stacks`` latitude bands is its own quad strip of
    ``2 * (slices + 1)`` vertices, from the +Z pole down.
    """
    phi = _sweep(slices)
    bands = []
    for i in range(stacks):
        theta1 = math.pi * i / stacks
        theta2 = math.pi * (i + 1) / stacks
        bands.append(_ring_pairs(_sphere_points(theta1, phi), _sphere_points(theta2, phi)))

    normals = np.concatenate(bands)
    band_len = 2 * (slices + 1)
    ranges = tuple((i * band_len, band_len) for i in range(stacks))
    return Mesh(
        positions=normals * radius,
        normals=normals,
        topology=Topology.QUAD_STRIP,
        ranges=ranges,
    )


# Cube corners: front face (z=+h) then back face (z=-h), each counter-clockwise
_CUBE_CORNERS = np.array([
    [-1, -1, 1], [1, -1, 1], [1, 1, 1], [-1, 1, 1],
    [-1, -1, -1], [1, -1, -1], [1, 1, -1], [-1, 1, -1],
], dtype=np.float64)

_CUBE_EDGES = (
    (0, 1), (1, 2), (2, 3), (3, 0),  # front face
    (4, 5), (5, 6), (6, 7), (7, 4),  # back face
    (0, 4), (1, 5), (2, 6), (3, 7),  # front to back
)


def make_wire_cube(size: float) -> Mesh:
    """The 12 edges of an axis-aligned cube of edge *size*, as line pairs."""
    corners = _CUBE_CORNERS * (size / 2.0)
    index = [i for edge in _CUBE_EDGES for i in edge]
    positions = corners[index]
    normals = _CUBE_CORNERS[index] / math.sqrt(3.0)
    return Mesh(positions=positions, normals=normals, topology=Topology.LINES)


def make_wire_sphere(radius: float, slices: int = 16, stacks: int = 16) -> tuple[Mesh, Mesh]:
    """Latitude/longitude wire sphere.

    Returns ``(latitudes, longitudes)``: ``stacks + 1`` line loops of
    ``slices`` vertices at constant theta (the pole loops collapse to a
    point), and ``slices`` pole-to-pole line strips of ``stacks + 1``
    vertices at constant phi.
    """
    theta = math.pi * np.arange(stacks + 1) / stacks
    phi = 2.0 * math.pi * np.arange(slices) / slices

    lat_dirs = _sphere_points(theta[:, np.newaxis], phi[np.newaxis, :]).reshape(-1, 3)
    latitudes = Mesh(
        positions=lat_dirs * radius,
        normals=lat_dirs,
        topology=Topology.LINE_LOOP,
        ranges=tuple((i * slices, slices) for i in range(stacks + 1)),
    )

    lon_dirs = _sphere_points(theta[np.newaxis, :], phi[:, np.newaxis]).reshape(-1, 3)
    longitudes = Mesh(
        positions=lon_dirs * radius,
        normals=lon_dirs,
        topology=Topology.LINE_STRIP,
        ranges=tuple((j * (stacks + 1), stacks + 1) for j in range(slices)),
    )
    return latitudes, longitudes


def make_grid(extent: float, step: float) -> Mesh:
    """Square grid in the XZ plane at y=0 from -extent to +extent, normal +Y.

    Subdivided so per-vertex lighting shows the spotlight's falloff.
    """
    cells = int(round(2.0 * extent / step))
    coords = -extent + step * np.arange(cells)
    x, z = np.meshgrid(coords, coords, indexing="ij")
    x, z = x.ravel(), z.ravel()
    y = np.zeros_like(x)

    v0 = np.column_stack([x, y, z])
    v1 = np.column_stack([x, y, z + step])
    v2 = np.column_stack([x + step, y, z + step])
    v3 = np.column_stack([x + step, y, z])
    positions = np.stack([v0, v1, v2, v0, v2, v3], axis=1).reshape(-1, 3)
    normals = np.tile([0.0, 1.0, 0.0], (len(positions), 1))
    return Mesh(positions=positions, normals=normals, topology=Topology.TRIANGLES)
