"""Tests for lamp.json loading."""

import json

import pytest

from luxolamp.constants import CONFIG_DIR, LAMP_CONFIG_NAME, LampDimensions
from luxolamp.core.config_loader import (
    LampConfig, lamp_config_from_dict, load_config, load_lamp_config,
)
from luxolamp.core.state import Joint


def test_empty_document_gives_defaults():
    assert lamp_config_from_dict({}) == LampConfig()


def test_shipped_config_matches_defaults():
    assert (CONFIG_DIR / LAMP_CONFIG_NAME).exists()
    assert load_lamp_config() == LampConfig()


def test_load_config_by_name():
    data = load_config(LAMP_CONFIG_NAME)
    assert data["rotation_step"] == 3.0


def test_partial_override():
    config = lamp_config_from_dict({
        "dimensions": {"lower_arm_length": 4.0},
        "limits": {"lower_arm": [0, 45]},
        "spotlight": {"cutoff_deg": 30.0, "attenuation": [1.0, 0.0, 0.0]},
    })
    assert config.dimensions.lower_arm_length == 4.0
    assert config.dimensions.base_radius == LampDimensions().base_radius
    assert config.limits.lower_arm == (0, 45)
    assert config.spotlight.cutoff_deg == 30.0
    assert config.spotlight.attenuation == (1.0, 0.0, 0.0)
    assert config.spotlight.exponent == 15.0


def test_pose_as_list_and_dict():
    a = lamp_config_from_dict({"default_pose": [0, 45, -60, -30, 0]})
    assert a.default_pose == (0.0, 45.0, -60.0, -30.0, 0.0)
    b = lamp_config_from_dict({"default_pose": {"lower_arm_angle": 45}})
    assert b.default_pose == (0.0, 45.0, -60.0, -90.0, 0.0)


def test_bad_pose():
    with pytest.raises(ValueError):
        lamp_config_from_dict({"default_pose": [1, 2, 3]})


@pytest.mark.parametrize("data", [
    {"colour": "red"},
    {"dimensions": {"arm_width": 1.0}},
    {"spotlight": {"angle": 40}},
    {"default_pose": {"elbow": 10}},
    {"limits": [1, 2]},
])
def test_unknown_keys_rejected(data):
    with pytest.raises(ValueError):
        lamp_config_from_dict(data)


@pytest.mark.parametrize("data", [
    {"limits": {"lower_arm": 5}},
    {"limits": {"lower_arm": [90, -10]}},
    {"limits": {"upper_arm": [-120, "90"]}},
    {"limits": {"lampshade_tilt": [-90, 0, 45]}},
    {"spotlight": {"depth_fraction": -3}},
    {"spotlight": {"depth_fraction": 0}},
    {"spotlight": {"depth_fraction": 1.5}},
    {"spotlight": {"attenuation": [1.0, 0.0]}},
    {"dimensions": {"lower_arm_length": "long"}},
    {"dimensions": {"base_height": 0}},
    {"rotation_step": "3"},
    {"rotation_step": 0},
    {"default_pose": [0, 30, -60, None, 0]},
    {"default_pose": {"lampshade_tilt": "down"}},
    {"spotlight_enabled": "yes"},
])
def test_malformed_values_rejected(data):
    with pytest.raises(ValueError):
        lamp_config_from_dict(data)


def test_depth_fraction_of_one_is_accepted():
    config = lamp_config_from_dict({"spotlight": {"depth_fraction": 1}})
    assert config.spotlight.depth_fraction == 1.0


def test_limits_are_stored_as_float_pairs():
    config = lamp_config_from_dict({"limits": {"lower_arm": [0, 45]}})
    assert config.limits.lower_arm == (0.0, 45.0)
    assert all(isinstance(v, float) for v in config.limits.lower_arm)
    state = config.make_state()
    assert state.angles.lower_arm_angle == 30.0


def test_make_state():
    config = lamp_config_from_dict({
        "default_pose": [10, 200, -60, -90, 0],
        "rotation_step": 5.0,
        "spotlight_enabled": False,
    })
    state = config.make_state()
    assert state.angles.lower_arm_angle == 90.0  # clamped
    assert state.step == 5.0
    assert state.spotlight_enabled is False
    assert state.selected_joint == Joint.BASE


def test_load_from_path(tmp_path):
    path = tmp_path / "lamp.json"
    path.write_text(json.dumps({"rotation_step": 1.5}))
    assert load_lamp_config(path).rotation_step == 1.5


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_lamp_config(tmp_path / "missing.json")
