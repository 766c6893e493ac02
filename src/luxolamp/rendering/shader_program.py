"""GLSL program compilation and uniform upload (OpenGL 3.3 core profile)."""

import logging
from pathlib import Path

import numpy as np
from OpenGL.GL import (
    GL_COMPILE_STATUS,
    GL_FRAGMENT_SHADER,
    GL_LINK_STATUS,
    GL_VERTEX_SHADER,
    glAttachShader,
    glCompileShader,
    glCreateProgram,
    glCreateShader,
    glDeleteProgram,
    glDeleteShader,
    glGetProgramInfoLog,
    glGetProgramiv,
    glGetShaderInfoLog,
    glGetShaderiv,
    glGetUniformLocation,
    glLinkProgram,
    glShaderSource,
    glUniform1f,
    glUniform1i,
    glUniform3f,
    glUniform4f,
    glUniformMatrix3fv,
    glUniformMatrix4fv,
    glUseProgram,
)

logger = logging.getLogger(__name__)

SHADER_DIR = Path(__file__).parent / "shaders"


def load_shader_source(filename: str) -> str:
    """Read a GLSL file from the shaders/ directory."""
    return (SHADER_DIR / filename).read_text(encoding="utf-8")


def _info_log(raw) -> str:
    return raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else str(raw)


class ShaderProgram:
    """A linked vertex + fragment program.

    Uniform locations are looked up once and cached; setters silently
    skip uniforms the driver optimised out.
    """

    def __init__(self, vertex_source: str, fragment_source: str) -> None:
        self._sources = {
            GL_VERTEX_SHADER: vertex_source,
            GL_FRAGMENT_SHADER: fragment_source,
        }
        self._program: int = 0
        self._locations: dict[str, int] = {}

    @classmethod
    def from_files(cls, vert_filename: str, frag_filename: str) -> "ShaderProgram":
        return cls(load_shader_source(vert_filename), load_shader_source(frag_filename))

    @property
    def program_id(self) -> int:
        return self._program

    def compile(self) -> None:
        """Compile both stages and link. Raises ``RuntimeError`` on failure."""
        stages = [self._compile_stage(kind, src) for kind, src in self._sources.items()]

        program = glCreateProgram()
        for stage in stages:
            glAttachShader(program, stage)
        glLinkProgram(program)
        linked = glGetProgramiv(program, GL_LINK_STATUS) == 1
        for stage in stages:
            glDeleteShader(stage)
        if not linked:
            info = _info_log(glGetProgramInfoLog(program))
            glDeleteProgram(program)
            raise RuntimeError(f"Shader program link error:\n{info}")

        self._program = program
        self._locations.clear()
        logger.debug("Shader program %d linked", program)

    def use(self) -> None:
        glUseProgram(self._program)

    def destroy(self) -> None:
        if self._program:
            glDeleteProgram(self._program)
            self._program = 0
            self._locations.clear()

    # ------------------------------------------------------------------
    # Uniforms
    # ------------------------------------------------------------------

    def uniform_location(self, name: str) -> int:
        loc = self._locations.get(name)
        if loc is None:
            loc = glGetUniformLocation(self._program, name)
            self._locations[name] = loc
            if loc < 0:
                logger.debug("Uniform '%s' not found (may be optimised out)", name)
        return loc

    def set_mat4(self, name: str, m: np.ndarray) -> None:
        loc = self.uniform_location(name)
        if loc >= 0:
            # Row-major numpy -> column-major GL; transpose here, not in the driver
            glUniformMatrix4fv(loc, 1, False, np.ascontiguousarray(m.T, dtype=np.float32))

    def set_mat3(self, name: str, m: np.ndarray) -> None:
        loc = self.uniform_location(name)
        if loc >= 0:
            glUniformMatrix3fv(loc, 1, False, np.ascontiguousarray(m.T, dtype=np.float32))

    def set_vec3(self, name: str, v) -> None:
        loc = self.uniform_location(name)
        if loc >= 0:
            glUniform3f(loc, float(v[0]), float(v[1]), float(v[2]))

    def set_vec4(self, name: str, v) -> None:
        loc = self.uniform_location(name)
        if loc >= 0:
            glUniform4f(loc, float(v[0]), float(v[1]), float(v[2]), float(v[3]))

    def set_float(self, name: str, value: float) -> None:
        loc = self.uniform_location(name)
        if loc >= 0:
            glUniform1f(loc, float(value))

    def set_int(self, name: str, value: int) -> None:
        loc = self.uniform_location(name)
        if loc >= 0:
            glUniform1i(loc, int(value))

    @staticmethod
    def _compile_stage(kind: int, source: str) -> int:
        shader = glCreateShader(kind)
        glShaderSource(shader, source)
        glCompileShader(shader)
        if glGetShaderiv(shader, GL_COMPILE_STATUS) != 1:
            info = _info_log(glGetShaderInfoLog(shader))
            glDeleteShader(shader)
            stage = "vertex" if kind == GL_VERTEX_SHADER else "fragment"
            raise RuntimeError(f"{stage} shader compile error:\n{info}")
        return shader
