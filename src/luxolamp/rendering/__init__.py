"""Rendering subsystem -- OpenGL 3.3 core profile with PySide6 integration."""

from luxolamp.rendering.camera import Camera
from luxolamp.rendering.gl_material import apply_material, restore_material_defaults
from luxolamp.rendering.gl_mesh import GLMesh
from luxolamp.rendering.gl_widget import LampViewport
from luxolamp.rendering.lights import LightSetup
from luxolamp.rendering.renderer import LampRenderer
from luxolamp.rendering.shader_program import ShaderProgram

__all__ = [
    "Camera",
    "GLMesh",
    "LampRenderer",
    "LampViewport",
    "LightSetup",
    "ShaderProgram",
    "apply_material",
    "restore_material_defaults",
]
