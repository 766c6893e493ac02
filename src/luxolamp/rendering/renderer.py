"""Main OpenGL renderer -- draws an assembled :class:`SceneFrame`.

Uses OpenGL 3.3 core profile with one lit/unlit Blinn-Phong program.
"""

import logging

import numpy as np
from OpenGL.GL import (
    GL_COLOR_BUFFER_BIT,
    GL_DEPTH_BUFFER_BIT,
    GL_DEPTH_TEST,
    GL_LESS,
    GL_MULTISAMPLE,
    glClear,
    glClearColor,
    glDepthFunc,
    glEnable,
    glViewport,
)

from luxolamp.constants import CLEAR_COLOR
from luxolamp.core.math_utils import Mat4, mat3_normal
from luxolamp.core.mesh import Mesh
from luxolamp.rendering.camera import Camera
from luxolamp.rendering.gl_material import apply_material, restore_material_defaults
from luxolamp.rendering.gl_mesh import GLMesh
from luxolamp.rendering.lights import LightSetup
from luxolamp.rendering.shader_program import ShaderProgram
from luxolamp.scene.scene_assembler import DrawItem, SceneFrame

logger = logging.getLogger(__name__)


def draw_order(items, eye) -> list[DrawItem]:
    """Opaque items in scene order, then transparent ones back to front."""
    opaque = [item for item in items if not item.material.transparent]
    transparent = [item for item in items if item.material.transparent]
    transparent.sort(
        key=lambda item: float(np.linalg.norm(item.transform[:3, 3] - eye)),
        reverse=True,
    )
    return opaque + transparent


class LampRenderer:
    """Uploads meshes on first use and draws each frame's items.

    Usage
    -----
    1. Call :meth:`init_gl` once after a valid GL context is current.
    2. Call :meth:`resize` whenever the viewport changes.
    3. Call :meth:`render` each frame.
    4. Call :meth:`destroy` on shutdown.
    """

    def __init__(self) -> None:
        self._shader: ShaderProgram | None = None
        self._gl_meshes: dict[int, GLMesh] = {}  # keyed by id(Mesh)
        self._width: int = 1
        self._height: int = 1
        self._frame_count: int = 0

    def init_gl(self) -> None:
        """Set up GL state and compile the shader. Needs a current context."""
        glClearColor(*CLEAR_COLOR)
        glEnable(GL_DEPTH_TEST)
        glDepthFunc(GL_LESS)
        glEnable(GL_MULTISAMPLE)

        shader = ShaderProgram.from_files("lamp.vert", "lamp.frag")
        shader.compile()
        self._shader = shader
        logger.info("LampRenderer initialised.")

    def resize(self, width: int, height: int) -> None:
        self._width = max(width, 1)
        self._height = max(height, 1)

    def destroy(self) -> None:
        for gl_mesh in self._gl_meshes.values():
            gl_mesh.destroy()
        self._gl_meshes.clear()
        if self._shader is not None:
            self._shader.destroy()
            self._shader = None
        logger.info("LampRenderer destroyed.")

    def render(self, frame: SceneFrame, camera: Camera, lights: LightSetup) -> None:
        """Clear, upload the frame's lights and draw every item."""
        if self._shader is None:
            return

        glViewport(0, 0, self._width, self._height)
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)

        view = camera.get_view_matrix()
        proj = camera.get_projection_matrix()

        shader = self._shader
        shader.use()
        shader.set_mat4("uProjection", proj)
        lights.apply(shader, frame.lights, view)

        items = draw_order(frame.items, camera.position)
        for item in items:
            self._draw_item(item, view)
        restore_material_defaults()

        self._frame_count += 1
        if self._frame_count <= 3:
            logger.debug(
                "Frame %d: %d items, %d lights, viewport %dx%d",
                self._frame_count, len(items), len(frame.lights),
                self._width, self._height,
            )

    def _draw_item(self, item: DrawItem, view: Mat4) -> None:
        model_view = view @ item.transform
        self._shader.set_mat4("uModelView", model_view)
        self._shader.set_mat3("uNormalMatrix", mat3_normal(model_view))
        apply_material(self._shader, item.material)
        self._gl_mesh(item.mesh).draw()

    def _gl_mesh(self, mesh: Mesh) -> GLMesh:
        gl_mesh = self._gl_meshes.get(id(mesh))
        if gl_mesh is None:
            gl_mesh = GLMesh(mesh)
            gl_mesh.upload()
            self._gl_meshes[id(mesh)] = gl_mesh
        return gl_mesh
