"""Shared constants and paths for luxolamp."""

from dataclasses import dataclass
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent.parent
ASSETS_DIR = PROJECT_ROOT / "assets"
CONFIG_DIR = ASSETS_DIR / "config"
LAMP_CONFIG_NAME = "lamp.json"


@dataclass(frozen=True)
class LampDimensions:
    """Physical lamp measurements, shared by the chain and the meshes.

    The chain's translation distances are the meshes' own extents, so
    both sides must be built from the same instance.
    """
    base_radius: float = 1.0
    base_height: float = 0.3
    arm_radius: float = 0.15
    lower_arm_length: float = 3.0
    upper_arm_length: float = 2.5
    lampshade_radius: float = 0.8
    lampshade_height: float = 1.2
    joint_scale: float = 1.5      # joint sphere radius = arm_radius * joint_scale
    highlight_scale: float = 2.5  # selection sphere radius = arm_radius * highlight_scale
    neck_ratio: float = 0.4       # narrow end of the shade, fraction of lampshade_radius
    glow_ratio: float = 0.5       # glow disk at the opening, fraction of lampshade_radius

    @property
    def joint_radius(self) -> float:
        return self.arm_radius * self.joint_scale

    @property
    def highlight_radius(self) -> float:
        return self.arm_radius * self.highlight_scale

    @property
    def neck_radius(self) -> float:
        return self.lampshade_radius * self.neck_ratio

    @property
    def glow_radius(self) -> float:
        return self.lampshade_radius * self.glow_ratio


LAMP_DIMENSIONS = LampDimensions()

# Joint limits (degrees); base rotation and shade spin are unbounded
LOWER_ARM_LIMITS = (-10.0, 90.0)
UPPER_ARM_LIMITS = (-120.0, 90.0)
LAMPSHADE_TILT_LIMITS = (-90.0, 45.0)

# Canonical pose: base, lower arm, upper arm, shade tilt, shade spin
DEFAULT_POSE = (0.0, 30.0, -60.0, -90.0, 0.0)
ROTATION_STEP = 3.0  # degrees per command

# Spotlight (photometric values are fixed, not derived from the pose)
SPOT_DEPTH_FRACTION = 0.6
SPOT_CUTOFF_DEG = 60.0
SPOT_EXPONENT = 15.0
SPOT_ATTENUATION = (0.5, 0.02, 0.005)  # constant, linear, quadratic
SPOT_DIFFUSE = (3.0, 2.5, 1.5)
SPOT_SPECULAR = (2.0, 2.0, 2.0)

# Dim fill light so the spotlight dominates
FILL_LIGHT_DIRECTION = (5.0, 10.0, 5.0)  # toward the light
FILL_LIGHT_AMBIENT = (0.05, 0.05, 0.05)
FILL_LIGHT_DIFFUSE = (0.1, 0.1, 0.1)
FILL_LIGHT_SPECULAR = (1.0, 1.0, 1.0)

# Scene-wide ambient term and background
GLOBAL_AMBIENT = (0.2, 0.2, 0.2)
CLEAR_COLOR = (0.0, 0.0, 0.0, 1.0)

# Tessellation
BASE_SLICES = 32
ARM_SLICES = 16
JOINT_SLICES = 16
JOINT_STACKS = 16
SHADE_SLICES = 32
HIGHLIGHT_SLICES = 16
HIGHLIGHT_STACKS = 16
BASE_HIGHLIGHT_SCALE = 2.2  # wire cube edge = base_radius * this

# Table grid
TABLE_EXTENT = 10.0  # half-size
TABLE_STEP = 0.5
TABLE_OFFSET_Y = -0.1

# Camera defaults (spherical placement around the target)
CAMERA_DISTANCE = 15.0
CAMERA_YAW_DEG = 20.0
CAMERA_PITCH_DEG = 30.0
CAMERA_TARGET = (0.0, 3.0, 0.0)
CAMERA_FOV_DEG = 45.0
CAMERA_NEAR = 0.1
CAMERA_FAR = 100.0

WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 768


@dataclass(frozen=True)
class SpotlightSettings:
    """Fixed spotlight placement fraction and photometric values."""
    depth_fraction: float = SPOT_DEPTH_FRACTION
    cutoff_deg: float = SPOT_CUTOFF_DEG
    exponent: float = SPOT_EXPONENT
    attenuation: tuple[float, float, float] = SPOT_ATTENUATION
    diffuse: tuple[float, float, float] = SPOT_DIFFUSE
    specular: tuple[float, float, float] = SPOT_SPECULAR


SPOTLIGHT_SETTINGS = SpotlightSettings()
