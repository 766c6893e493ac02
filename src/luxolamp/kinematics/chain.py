"""Forward kinematics for the lamp's rigid hierarchy.

The chain composes a fixed sequence of local transforms, each step
right-multiplying the running transform::

    base         rotate base_rotation about Y
    lower_joint  translate up by base height
    lower_arm    rotate lower_arm_angle about X
    upper_joint  translate along the arm by the lower arm length
    upper_arm    rotate upper_arm_angle about X
    shade_joint  translate along the arm by the upper arm length
    shade_tilt   rotate lampshade_tilt about X
    shade_spin   rotate lampshade_spin about Y
    shade_mount  translate past the joint sphere
    lampshade    rotate -90 about X so local +Z runs along the cone axis

Every intermediate frame is kept, because each segment mesh is drawn in
the frame of a particular step. Angles are used as given; clamping
happens when they are written.
"""

from dataclasses import dataclass
from typing import Iterator

from luxolamp.constants import LAMP_DIMENSIONS, LampDimensions
from luxolamp.core.math_utils import (
    Mat4,
    Vec3,
    X_AXIS,
    Y_AXIS,
    mat4_identity,
    mat4_rotation_deg,
    mat4_translation,
)
from luxolamp.core.state import JointAngles

# Orientation correction between the arm frame (+Y along the arm) and the
# shade frame (+Z out of the opening)
SHADE_CORRECTION_DEG = -90.0

CHAIN_STEPS = (
    "base",
    "lower_joint",
    "lower_arm",
    "upper_joint",
    "upper_arm",
    "shade_joint",
    "shade_tilt",
    "shade_spin",
    "shade_mount",
    "lampshade",
)


@dataclass(frozen=True)
class ChainPose:
    """World transforms after every chain step, keyed by step name."""
    frames: dict[str, Mat4]

    def frame(self, name: str) -> Mat4:
        try:
            return self.frames[name]
        except KeyError:
            raise KeyError(f"Unknown chain frame '{name}'") from None

    def world_position(self, name: str) -> Vec3:
        """Origin of a frame in world space."""
        return self.frame(name)[:3, 3].copy()

    def __iter__(self) -> Iterator[tuple[str, Mat4]]:
        return iter(self.frames.items())

    # Frames segments are drawn in
    @property
    def base(self) -> Mat4:
        return self.frames["base"]

    @property
    def lampshade(self) -> Mat4:
        return self.frames["lampshade"]


class KinematicChain:
    """Turns joint angles into per-step world transforms."""

    def __init__(self, dimensions: LampDimensions = LAMP_DIMENSIONS) -> None:
        self.dimensions = dimensions

    def local_steps(self, angles: JointAngles) -> list[tuple[str, Mat4]]:
        """The local transform contributed by each step, in order."""
        d = self.dimensions
        return [
            ("base", mat4_rotation_deg(angles.base_rotation, Y_AXIS)),
            ("lower_joint", mat4_translation(0.0, d.base_height, 0.0)),
            ("lower_arm", mat4_rotation_deg(angles.lower_arm_angle, X_AXIS)),
            ("upper_joint", mat4_translation(0.0, d.lower_arm_length, 0.0)),
            ("upper_arm", mat4_rotation_deg(angles.upper_arm_angle, X_AXIS)),
            ("shade_joint", mat4_translation(0.0, d.upper_arm_length, 0.0)),
            ("shade_tilt", mat4_rotation_deg(angles.lampshade_tilt, X_AXIS)),
            ("shade_spin", mat4_rotation_deg(angles.lampshade_spin, Y_AXIS)),
            ("shade_mount", mat4_translation(0.0, d.joint_radius, 0.0)),
            ("lampshade", mat4_rotation_deg(SHADE_CORRECTION_DEG, X_AXIS)),
        ]

    def solve(self, angles: JointAngles, root: Mat4 | None = None) -> ChainPose:
        """Compose the chain from *root* (default: world origin)."""
        current = mat4_identity() if root is None else root.copy()
        frames: dict[str, Mat4] = {}
        for name, local in self.local_steps(angles):
            current = current @ local
            world = current.copy()
            world.setflags(write=False)
            frames[name] = world
        return ChainPose(frames=frames)


def solve_chain(angles: JointAngles, dimensions: LampDimensions = LAMP_DIMENSIONS) -> ChainPose:
    """Shortcut for ``KinematicChain(dimensions).solve(angles)``."""
    return KinematicChain(dimensions).solve(angles)
