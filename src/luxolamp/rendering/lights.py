"""Upload of the frame's light list into the lamp shader."""

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from luxolamp.constants import GLOBAL_AMBIENT
from luxolamp.core.math_utils import Mat4, normalize, transform_direction, transform_point
from luxolamp.kinematics.spotlight import SpotlightParams
from luxolamp.rendering.shader_program import ShaderProgram
from luxolamp.scene.scene_assembler import DirectionalLight, Light

logger = logging.getLogger(__name__)

# Must match MAX_LIGHTS in lamp.frag
MAX_LIGHTS = 4

_NO_ATTENUATION = (1.0, 0.0, 0.0)


@dataclass
class LightUniform:
    """One entry of the shader's ``uLights`` array, in view space.

    Attributes
    ----------
    position : np.ndarray
        Homogeneous position; ``w == 0`` marks a directional light whose
        xyz points toward the light.
    spot_cos_cutoff : float
        Cosine of the cone half-angle, -1 for no cone.
    """
    position: np.ndarray
    ambient: tuple[float, float, float]
    diffuse: tuple[float, float, float]
    specular: tuple[float, float, float]
    spot_direction: np.ndarray
    spot_cos_cutoff: float = -1.0
    spot_exponent: float = 0.0
    attenuation: tuple[float, float, float] = _NO_ATTENUATION


def to_view_space(light: Light, view: Mat4) -> LightUniform:
    """Convert a world-space light descriptor for upload."""
    if isinstance(light, DirectionalLight):
        direction = normalize(transform_direction(view, light.direction))
        return LightUniform(
            position=np.append(direction, 0.0),
            ambient=light.ambient,
            diffuse=light.diffuse,
            specular=light.specular,
            spot_direction=-direction,
        )
    if isinstance(light, SpotlightParams):
        return LightUniform(
            position=np.append(transform_point(view, light.position), 1.0),
            ambient=(0.0, 0.0, 0.0),
            diffuse=light.diffuse,
            specular=light.specular,
            spot_direction=normalize(transform_direction(view, light.direction)),
            spot_cos_cutoff=light.cos_cutoff,
            spot_exponent=light.exponent,
            attenuation=light.attenuation,
        )
    raise TypeError(f"Unsupported light {light!r}")


class LightSetup:
    """Scene-wide ambient term plus upload of per-frame lights."""

    def __init__(self, global_ambient: tuple[float, float, float] = GLOBAL_AMBIENT) -> None:
        self.global_ambient = global_ambient

    def apply(self, shader: ShaderProgram, lights: Sequence[Light], view: Mat4) -> None:
        """Upload *lights* (world space) through *view*.

        Must be called after ``shader.use()``.
        """
        if len(lights) > MAX_LIGHTS:
            logger.warning("Only the first %d of %d lights are used", MAX_LIGHTS, len(lights))
            lights = lights[:MAX_LIGHTS]

        shader.set_vec3("uGlobalAmbient", self.global_ambient)
        shader.set_int("uLightCount", len(lights))
        for i, light in enumerate(lights):
            u = to_view_space(light, view)
            prefix = f"uLights[{i}]."
            shader.set_vec4(prefix + "position", u.position)
            shader.set_vec3(prefix + "ambient", u.ambient)
            shader.set_vec3(prefix + "diffuse", u.diffuse)
            shader.set_vec3(prefix + "specular", u.specular)
            shader.set_vec3(prefix + "spotDirection", u.spot_direction)
            shader.set_float(prefix + "spotCosCutoff", u.spot_cos_cutoff)
            shader.set_float(prefix + "spotExponent", u.spot_exponent)
            shader.set_vec3(prefix + "attenuation", u.attenuation)
