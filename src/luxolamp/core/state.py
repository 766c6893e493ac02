"""Joint angle state for the lamp and the commands that mutate it."""

import logging
from dataclasses import dataclass, fields, replace
from enum import IntEnum
from typing import Optional

from luxolamp.constants import (
    DEFAULT_POSE,
    LAMPSHADE_TILT_LIMITS,
    LOWER_ARM_LIMITS,
    ROTATION_STEP,
    UPPER_ARM_LIMITS,
)
from luxolamp.core.math_utils import clamp, wrap_degrees

logger = logging.getLogger(__name__)


class Joint(IntEnum):
    """Selectable joints, numbered as on the keyboard."""
    BASE = 1
    LOWER_ARM = 2
    UPPER_ARM = 3
    LAMPSHADE = 4

    @property
    def display_name(self) -> str:
        return _JOINT_NAMES[self]


_JOINT_NAMES = {
    Joint.BASE: "Base",
    Joint.LOWER_ARM: "Lower Arm",
    Joint.UPPER_ARM: "Upper Arm",
    Joint.LAMPSHADE: "Lampshade",
}


class RotateDirection(IntEnum):
    """Arrow directions. Right/up increase the bound angle."""
    LEFT = -1
    RIGHT = 1
    DOWN = -2
    UP = 2

    @property
    def sign(self) -> float:
        return 1.0 if self > 0 else -1.0

    @property
    def is_horizontal(self) -> bool:
        return abs(self) == 1


@dataclass
class JointAngles:
    """The five joint angles in degrees."""
    base_rotation: float = 0.0
    lower_arm_angle: float = 0.0
    upper_arm_angle: float = 0.0
    lampshade_tilt: float = 0.0
    lampshade_spin: float = 0.0

    @classmethod
    def from_tuple(cls, values) -> "JointAngles":
        return cls(*(float(v) for v in values))

    def as_tuple(self) -> tuple[float, float, float, float, float]:
        return tuple(getattr(self, f.name) for f in fields(self))

    def to_dict(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict) -> "JointAngles":
        """Angles from a name-keyed mapping; missing names default to 0."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown joint angle(s): {', '.join(sorted(unknown))}")
        return cls(**{k: float(v) for k, v in data.items()})

    def copy(self) -> "JointAngles":
        return replace(self)


@dataclass(frozen=True)
class JointLimits:
    """Clamp ranges (degrees) for the bounded angles."""
    lower_arm: tuple[float, float] = LOWER_ARM_LIMITS
    upper_arm: tuple[float, float] = UPPER_ARM_LIMITS
    lampshade_tilt: tuple[float, float] = LAMPSHADE_TILT_LIMITS

    def for_field(self, name: str) -> Optional[tuple[float, float]]:
        """Limits for a JointAngles field, or None if it is unbounded."""
        return _FIELD_LIMITS.get(name, lambda _: None)(self)


_FIELD_LIMITS = {
    "lower_arm_angle": lambda lim: lim.lower_arm,
    "upper_arm_angle": lambda lim: lim.upper_arm,
    "lampshade_tilt": lambda lim: lim.lampshade_tilt,
}

# (joint, horizontal?) -> angle field moved by the arrow keys
_ROTATION_BINDINGS = {
    (Joint.BASE, True): "base_rotation",
    (Joint.LOWER_ARM, False): "lower_arm_angle",
    (Joint.UPPER_ARM, False): "upper_arm_angle",
    (Joint.LAMPSHADE, False): "lampshade_tilt",
    (Joint.LAMPSHADE, True): "lampshade_spin",
}


def bound_field(joint: Joint, direction: RotateDirection) -> Optional[str]:
    """Name of the angle a direction moves for a joint, or None."""
    return _ROTATION_BINDINGS.get((joint, direction.is_horizontal))


def clamp_angle(name: str, value: float, limits: JointLimits = JointLimits()) -> float:
    """Clamp a bounded angle or wrap an unbounded one into [0, 360)."""
    bounds = limits.for_field(name)
    if bounds is None:
        return wrap_degrees(value)
    return clamp(value, bounds[0], bounds[1])


class JointState:
    """Owns the joint angles, the joint selection and the spotlight toggle.

    Angles are clamped when written, so readers never see an
    out-of-range value.
    """

    def __init__(
        self,
        default_pose: JointAngles | None = None,
        limits: JointLimits | None = None,
        step: float = ROTATION_STEP,
        spotlight_enabled: bool = True,
    ) -> None:
        self.limits = limits or JointLimits()
        self.step = step
        self._default = self._clamped(default_pose or JointAngles.from_tuple(DEFAULT_POSE))
        self.angles: JointAngles = self._default.copy()
        self.selected_joint: Joint = Joint.BASE
        self.spotlight_enabled: bool = spotlight_enabled

    @property
    def default_pose(self) -> JointAngles:
        return self._default.copy()

    def select_joint(self, n: int) -> bool:
        """Select joint 1-4. Anything else is ignored; returns whether it applied."""
        if isinstance(n, bool):
            logger.debug("Ignoring joint selection %r", n)
            return False
        try:
            joint = Joint(n)
        except ValueError:
            logger.debug("Ignoring joint selection %r", n)
            return False
        self.selected_joint = joint
        return True

    def rotate(self, direction: RotateDirection, delta: float | None = None) -> Optional[str]:
        """Move the selected joint's bound angle by one step.

        Returns the name of the angle that changed, or None when the
        direction has no meaning for the selected joint.
        """
        name = bound_field(self.selected_joint, direction)
        if name is None:
            return None
        amount = self.step if delta is None else delta
        self.set_angle(name, getattr(self.angles, name) + direction.sign * amount)
        return name

    def set_angle(self, name: str, value: float) -> float:
        """Write one angle through the clamp and return the stored value."""
        if not hasattr(self.angles, name):
            raise KeyError(f"Unknown joint angle '{name}'")
        stored = clamp_angle(name, float(value), self.limits)
        setattr(self.angles, name, stored)
        return stored

    def toggle_spotlight(self) -> bool:
        self.spotlight_enabled = not self.spotlight_enabled
        return self.spotlight_enabled

    def reset(self) -> None:
        """Restore the canonical pose."""
        self.angles = self._default.copy()

    def _clamped(self, angles: JointAngles) -> JointAngles:
        return JointAngles(**{
            name: clamp_angle(name, value, self.limits)
            for name, value in angles.to_dict().items()
        })


def selected_joint_text(joint: Joint) -> str:
    return f"Selected Joint: {joint.display_name}"


def spotlight_text(enabled: bool) -> str:
    return f"Spotlight: {'ON' if enabled else 'OFF'}"
