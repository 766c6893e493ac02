"""JSON config file loading utilities."""

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

from luxolamp.constants import (
    CONFIG_DIR,
    DEFAULT_POSE,
    LAMP_CONFIG_NAME,
    ROTATION_STEP,
    LampDimensions,
    SpotlightSettings,
)
from luxolamp.core.state import JointAngles, JointLimits, JointState

logger = logging.getLogger(__name__)


def load_json(path: Path) -> Any:
    """Load and return parsed JSON from a file."""
    with open(path) as f:
        return json.load(f)


def load_config(name: str) -> Any:
    """Load a config file from assets/config/."""
    return load_json(CONFIG_DIR / name)


@dataclass(frozen=True)
class LampConfig:
    """Everything a lamp session is built from."""
    dimensions: LampDimensions = field(default_factory=LampDimensions)
    limits: JointLimits = field(default_factory=JointLimits)
    default_pose: tuple[float, ...] = DEFAULT_POSE
    rotation_step: float = ROTATION_STEP
    spotlight: SpotlightSettings = field(default_factory=SpotlightSettings)
    spotlight_enabled: bool = True

    def make_state(self) -> JointState:
        """Create a JointState initialised from this config."""
        return JointState(
            default_pose=JointAngles.from_tuple(self.default_pose),
            limits=self.limits,
            step=self.rotation_step,
            spotlight_enabled=self.spotlight_enabled,
        )


def _override(cls, defaults, data: dict, section: str):
    """Build a frozen dataclass from *defaults* with *data* applied."""
    if not isinstance(data, dict):
        raise ValueError(f"'{section}' must be an object, got {type(data).__name__}")
    known = {f.name for f in fields(cls)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown key(s) in '{section}': {', '.join(sorted(unknown))}")
    values = {f.name: getattr(defaults, f.name) for f in fields(cls)}
    for key, value in data.items():
        values[key] = tuple(value) if isinstance(value, list) else value
    return cls(**values)


def _number(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{where}' must be a number, got {value!r}")
    return float(value)


def _numbers(value: Any, count: int, where: str) -> tuple[float, ...]:
    if not isinstance(value, (list, tuple)) or len(value) != count:
        raise ValueError(f"'{where}' must be a list of {count} numbers, got {value!r}")
    return tuple(_number(v, where) for v in value)


def _check_dimensions(dims: LampDimensions) -> LampDimensions:
    values = {}
    for f in fields(dims):
        value = _number(getattr(dims, f.name), f"dimensions.{f.name}")
        if value <= 0:
            raise ValueError(f"'dimensions.{f.name}' must be positive, got {value}")
        values[f.name] = value
    return LampDimensions(**values)


def _check_limits(limits: JointLimits) -> JointLimits:
    values = {}
    for f in fields(limits):
        lo, hi = _numbers(getattr(limits, f.name), 2, f"limits.{f.name}")
        if lo > hi:
            raise ValueError(f"'limits.{f.name}' is inverted: [{lo}, {hi}]")
        values[f.name] = (lo, hi)
    return JointLimits(**values)


def _check_spotlight(spot: SpotlightSettings) -> SpotlightSettings:
    depth = _number(spot.depth_fraction, "spotlight.depth_fraction")
    if not 0.0 < depth <= 1.0:
        raise ValueError(f"'spotlight.depth_fraction' must be in (0, 1], got {depth}")
    return SpotlightSettings(
        depth_fraction=depth,
        cutoff_deg=_number(spot.cutoff_deg, "spotlight.cutoff_deg"),
        exponent=_number(spot.exponent, "spotlight.exponent"),
        attenuation=_numbers(spot.attenuation, 3, "spotlight.attenuation"),
        diffuse=_numbers(spot.diffuse, 3, "spotlight.diffuse"),
        specular=_numbers(spot.specular, 3, "spotlight.specular"),
    )


def _parse_pose(value: Any) -> tuple[float, ...]:
    if isinstance(value, dict):
        angles = _override(JointAngles, JointAngles.from_tuple(DEFAULT_POSE), value, "default_pose")
        return tuple(_number(v, f"default_pose.{k}") for k, v in angles.to_dict().items())
    if isinstance(value, (list, tuple)) and len(value) == 5:
        return _numbers(value, 5, "default_pose")
    raise ValueError("'default_pose' must be an object or a list of 5 angles")


def lamp_config_from_dict(data: dict) -> LampConfig:
    """Merge a parsed lamp.json document onto the defaults."""
    base = LampConfig()
    unknown = set(data) - {f.name for f in fields(LampConfig)}
    if unknown:
        raise ValueError(f"Unknown key(s) in lamp config: {', '.join(sorted(unknown))}")
    rotation_step = _number(data.get("rotation_step", base.rotation_step), "rotation_step")
    if rotation_step <= 0:
        raise ValueError(f"'rotation_step' must be positive, got {rotation_step}")
    spotlight_enabled = data.get("spotlight_enabled", base.spotlight_enabled)
    if not isinstance(spotlight_enabled, bool):
        raise ValueError(f"'spotlight_enabled' must be true or false, got {spotlight_enabled!r}")
    return LampConfig(
        dimensions=_check_dimensions(
            _override(LampDimensions, base.dimensions, data.get("dimensions", {}), "dimensions")),
        limits=_check_limits(_override(JointLimits, base.limits, data.get("limits", {}), "limits")),
        default_pose=_parse_pose(data["default_pose"]) if "default_pose" in data else base.default_pose,
        rotation_step=rotation_step,
        spotlight=_check_spotlight(
            _override(SpotlightSettings, base.spotlight, data.get("spotlight", {}), "spotlight")),
        spotlight_enabled=spotlight_enabled,
    )


def load_lamp_config(path: Optional[Path] = None) -> LampConfig:
    """Load lamp.json (default: assets/config/lamp.json).

    Raises ``FileNotFoundError`` when the file does not exist.
    """
    path = Path(path) if path is not None else CONFIG_DIR / LAMP_CONFIG_NAME
    config = lamp_config_from_dict(load_json(path))
    logger.info("Loaded lamp config from %s", path)
    return config
