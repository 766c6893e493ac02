"""Mesh data structures for generated geometry (no GL dependencies)."""

from dataclasses import dataclass
from enum import Enum, auto

import numpy as np
from numpy.typing import NDArray


class Topology(Enum):
    """How consecutive vertices connect into primitives."""
    TRIANGLES = auto()
    TRIANGLE_STRIP = auto()
    QUAD_STRIP = auto()
    LINES = auto()
    LINE_LOOP = auto()
    LINE_STRIP = auto()

    @property
    def is_line(self) -> bool:
        return self in (Topology.LINES, Topology.LINE_LOOP, Topology.LINE_STRIP)


@dataclass(frozen=True)
class Mesh:
    """Vertex positions, parallel unit normals and a topology tag.

    positions: (N, 3) float32
    normals: (N, 3) float32
    ranges: ``(first, count)`` sub-ranges, each drawn as its own
        primitive of ``topology``. Defaults to one range over all vertices.
    """
    positions: NDArray[np.float32]
    normals: NDArray[np.float32]
    topology: Topology
    ranges: tuple[tuple[int, int], ...] = ()

    def __post_init__(self):
        positions = np.ascontiguousarray(self.positions, dtype=np.float32).reshape(-1, 3)
        normals = np.ascontiguousarray(self.normals, dtype=np.float32).reshape(-1, 3)
        if positions.shape != normals.shape:
            raise ValueError(
                f"positions {positions.shape} and normals {normals.shape} differ"
            )
        positions.setflags(write=False)
        normals.setflags(write=False)
        object.__setattr__(self, "positions", positions)
        object.__setattr__(self, "normals", normals)
        if not self.ranges:
            object.__setattr__(self, "ranges", ((0, len(positions)),))

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def line_segment_count(self) -> int:
        """Number of drawn line segments (0 for surface topologies)."""
        if self.topology == Topology.LINES:
            return self.vertex_count // 2
        if self.topology == Topology.LINE_STRIP:
            return sum(max(count - 1, 0) for _, count in self.ranges)
        if self.topology == Topology.LINE_LOOP:
            return sum(count for _, count in self.ranges if count > 1)
        return 0

    def range_positions(self, index: int) -> NDArray[np.float32]:
        """Positions of one sub-range."""
        first, count = self.ranges[index]
        return self.positions[first:first + count]

    def line_segments(self) -> NDArray[np.float32]:
        """All drawn edges as an (S, 2, 3) array (line topologies only)."""
        if not self.topology.is_line:
            raise ValueError(f"{self.topology.name} mesh has no line segments")
        segments = []
        if self.topology == Topology.LINES:
            return self.positions.reshape(-1, 2, 3)
        for i in range(len(self.ranges)):
            pts = self.range_positions(i)
            if self.topology == Topology.LINE_LOOP and len(pts) > 1:
                pts = np.concatenate([pts, pts[:1]])
            segments.append(np.stack([pts[:-1], pts[1:]], axis=1))
        if not segments:
            return np.zeros((0, 2, 3), dtype=np.float32)
        return np.concatenate(segments)

    def triangles(self) -> NDArray[np.float32]:
        """All drawn triangles as a (T, 3, 3) array (surface topologies only)."""
        if self.topology.is_line:
            raise ValueError(f"{self.topology.name} mesh has no triangles")
        tris = []
        for i in range(len(self.ranges)):
            pts = self.range_positions(i)
            if self.topology == Topology.TRIANGLES:
                tris.append(pts[: len(pts) // 3 * 3].reshape(-1, 3, 3))
                continue
            # Strips: quad strips share the triangle strip vertex order
            for j in range(len(pts) - 2):
                if j % 2 == 0:
                    tris.append(pts[[j, j + 1, j + 2]][np.newaxis])
                else:
                    tris.append(pts[[j + 1, j, j + 2]][np.newaxis])
        if not tris:
            return np.zeros((0, 3, 3), dtype=np.float32)
        return np.concatenate(tris)
