"""VAO / VBO upload and drawing of generated :class:`Mesh` data.

Each GLMesh owns one VAO with positions at attribute location 0 and
normals at location 1. Meshes never change after generation, so both
buffers are static.
"""

import logging

import numpy as np
from OpenGL.GL import (
    GL_ARRAY_BUFFER,
    GL_FALSE,
    GL_FLOAT,
    GL_LINE_LOOP,
    GL_LINE_STRIP,
    GL_LINES,
    GL_STATIC_DRAW,
    GL_TRIANGLE_STRIP,
    GL_TRIANGLES,
    glBindBuffer,
    glBindVertexArray,
    glBufferData,
    glDeleteBuffers,
    glDeleteVertexArrays,
    glDrawArrays,
    glEnableVertexAttribArray,
    glGenBuffers,
    glGenVertexArrays,
    glVertexAttribPointer,
)

from luxolamp.core.mesh import Mesh, Topology

logger = logging.getLogger(__name__)

# Core profile has no quad strips; the vertex order of a quad strip is
# already a valid triangle strip.
GL_PRIMITIVES = {
    Topology.TRIANGLES: GL_TRIANGLES,
    Topology.TRIANGLE_STRIP: GL_TRIANGLE_STRIP,
    Topology.QUAD_STRIP: GL_TRIANGLE_STRIP,
    Topology.LINES: GL_LINES,
    Topology.LINE_LOOP: GL_LINE_LOOP,
    Topology.LINE_STRIP: GL_LINE_STRIP,
}


def gl_primitive(topology: Topology) -> int:
    return GL_PRIMITIVES[topology]


class GLMesh:
    """GPU-side copy of a :class:`Mesh`.

    Call :meth:`upload` once with a current context, then :meth:`draw`
    every frame after the shader and its uniforms are bound.
    """

    def __init__(self, mesh: Mesh) -> None:
        self.mesh = mesh
        self._vao: int = 0
        self._buffers: list[int] = []

    @property
    def uploaded(self) -> bool:
        return self._vao != 0

    def upload(self) -> None:
        if self.uploaded:
            self.destroy()

        self._vao = glGenVertexArrays(1)
        glBindVertexArray(self._vao)
        for location, data in enumerate((self.mesh.positions, self.mesh.normals)):
            buf = glGenBuffers(1)
            array = np.ascontiguousarray(data, dtype=np.float32)
            glBindBuffer(GL_ARRAY_BUFFER, buf)
            glBufferData(GL_ARRAY_BUFFER, array.nbytes, array, GL_STATIC_DRAW)
            glVertexAttribPointer(location, 3, GL_FLOAT, GL_FALSE, 0, None)
            glEnableVertexAttribArray(location)
            self._buffers.append(buf)
        glBindVertexArray(0)
        glBindBuffer(GL_ARRAY_BUFFER, 0)

        logger.debug(
            "GLMesh uploaded: %d verts, %d ranges, %s",
            self.mesh.vertex_count, len(self.mesh.ranges), self.mesh.topology.name,
        )

    def draw(self) -> None:
        """Issue one draw call per sub-range of the mesh."""
        if not self.uploaded:
            return
        primitive = gl_primitive(self.mesh.topology)
        glBindVertexArray(self._vao)
        for first, count in self.mesh.ranges:
            glDrawArrays(primitive, first, count)
        glBindVertexArray(0)

    def destroy(self) -> None:
        if self._buffers:
            glDeleteBuffers(len(self._buffers), self._buffers)
            self._buffers = []
        if self._vao:
            glDeleteVertexArrays(1, [self._vao])
            self._vao = 0
