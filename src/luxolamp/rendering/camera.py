"""Fixed perspective camera placed on a sphere around the world origin."""

import math

from luxolamp.constants import (
    CAMERA_DISTANCE,
    CAMERA_FAR,
    CAMERA_FOV_DEG,
    CAMERA_NEAR,
    CAMERA_PITCH_DEG,
    CAMERA_TARGET,
    CAMERA_YAW_DEG,
)
from luxolamp.core.math_utils import (
    Mat4,
    Vec3,
    deg_to_rad,
    mat4_look_at,
    mat4_perspective,
    vec3,
)


class Camera:
    """A perspective camera that produces view and projection matrices.

    Parameters
    ----------
    distance : float
        Distance of the eye from the world origin.
    yaw_deg, pitch_deg : float
        Spherical angles of the eye: yaw about +Y measured from +Z,
        pitch above the XZ plane.
    target : tuple
        Point the camera looks at.
    """

    def __init__(
        self,
        distance: float = CAMERA_DISTANCE,
        yaw_deg: float = CAMERA_YAW_DEG,
        pitch_deg: float = CAMERA_PITCH_DEG,
        target: tuple[float, float, float] = CAMERA_TARGET,
        fov: float = CAMERA_FOV_DEG,
        near: float = CAMERA_NEAR,
        far: float = CAMERA_FAR,
    ) -> None:
        self.distance = distance
        self.yaw_deg = yaw_deg
        self.pitch_deg = pitch_deg
        self.target: Vec3 = vec3(*target)
        self.up: Vec3 = vec3(0.0, 1.0, 0.0)
        self.fov = fov
        self.near = near
        self.far = far
        self.aspect: float = 1.0

    @property
    def position(self) -> Vec3:
        yaw = deg_to_rad(self.yaw_deg)
        pitch = deg_to_rad(self.pitch_deg)
        return vec3(
            self.distance * math.cos(pitch) * math.sin(yaw),
            self.distance * math.sin(pitch),
            self.distance * math.cos(pitch) * math.cos(yaw),
        )

    def set_aspect(self, width: int, height: int) -> None:
        """Update the aspect ratio from viewport dimensions."""
        if height > 0:
            self.aspect = width / height

    def get_view_matrix(self) -> Mat4:
        return mat4_look_at(self.position, self.target, self.up)

    def get_projection_matrix(self) -> Mat4:
        return mat4_perspective(deg_to_rad(self.fov), self.aspect, self.near, self.far)
