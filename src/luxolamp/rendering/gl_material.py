"""Apply Material properties to a shader program and configure GL state."""

from OpenGL.GL import (
    GL_BLEND,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_SRC_ALPHA,
    glBlendFunc,
    glDepthMask,
    glDisable,
    glEnable,
)

from luxolamp.core.material import Material
from luxolamp.rendering.shader_program import ShaderProgram


def apply_material(shader: ShaderProgram, material: Material) -> None:
    """Set material uniforms and blending for the next draw call.

    Must be called after ``shader.use()``.
    """
    shader.set_vec3("uColor", material.color)
    shader.set_float("uOpacity", material.opacity)
    shader.set_vec3("uSpecular", material.specular)
    shader.set_float("uShininess", material.shininess)
    shader.set_int("uLit", 1 if material.lit else 0)

    if material.transparent:
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glDepthMask(False)
    else:
        glDisable(GL_BLEND)
        glDepthMask(True)


def restore_material_defaults() -> None:
    """Undo the GL state :func:`apply_material` may have changed."""
    glDisable(GL_BLEND)
    glDepthMask(True)
