"""Spotlight placement derived from the lampshade frame.

The light is positioned and aimed from the same :class:`ChainPose` frame
the shade mesh is drawn in, so the cone stays aligned with the shade
opening for any base rotation or shade spin.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from luxolamp.constants import (
    LAMP_DIMENSIONS,
    SPOTLIGHT_SETTINGS,
    LampDimensions,
    SpotlightSettings,
)
from luxolamp.core.math_utils import (
    Mat4,
    Vec3,
    normalize,
    transform_direction,
    transform_point,
    vec3,
)
from luxolamp.kinematics.chain import ChainPose

# Shade-local axis out of the opening
SHADE_AXIS = vec3(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class SpotlightParams:
    """A world-space spotlight descriptor, rebuilt every frame."""
    position: Vec3
    direction: Vec3
    cutoff_deg: float
    exponent: float
    attenuation: tuple[float, float, float]
    diffuse: tuple[float, float, float]
    specular: tuple[float, float, float]

    @property
    def cos_cutoff(self) -> float:
        return float(np.cos(np.radians(self.cutoff_deg)))


def derive_spotlight(
    lampshade: Mat4,
    dimensions: LampDimensions = LAMP_DIMENSIONS,
    settings: SpotlightSettings = SPOTLIGHT_SETTINGS,
) -> SpotlightParams:
    """Place the light at ``depth_fraction`` of the shade height, aimed along +Z.

    *lampshade* is the chain's final frame (after the orientation correction).
    """
    depth = settings.depth_fraction * dimensions.lampshade_height
    position = transform_point(lampshade, vec3(0.0, 0.0, depth))
    direction = normalize(transform_direction(lampshade, SHADE_AXIS))
    return SpotlightParams(
        position=position,
        direction=direction,
        cutoff_deg=settings.cutoff_deg,
        exponent=settings.exponent,
        attenuation=settings.attenuation,
        diffuse=settings.diffuse,
        specular=settings.specular,
    )


def spotlight_for_pose(
    pose: ChainPose,
    enabled: bool,
    dimensions: LampDimensions = LAMP_DIMENSIONS,
    settings: SpotlightSettings = SPOTLIGHT_SETTINGS,
) -> Optional[SpotlightParams]:
    """The pose's spotlight, or None when it is switched off."""
    if not enabled:
        return None
    return derive_spotlight(pose.lampshade, dimensions, settings)
