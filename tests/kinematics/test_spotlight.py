"""Tests for spotlight derivation from the lampshade frame."""

import math

import numpy as np
import pytest

from luxolamp.constants import LAMP_DIMENSIONS, SPOTLIGHT_SETTINGS, SpotlightSettings
from luxolamp.core.math_utils import normalize, transform_point
from luxolamp.core.state import JointAngles
from luxolamp.kinematics.chain import solve_chain
from luxolamp.kinematics.spotlight import derive_spotlight, spotlight_for_pose


def test_default_pose_points_down_and_forward():
    pose = solve_chain(JointAngles(0.0, 30.0, -60.0, -90.0, 0.0))
    spot = derive_spotlight(pose.lampshade)
    a = math.radians(30.0 - 60.0 - 90.0)
    np.testing.assert_allclose(spot.direction, [0.0, math.cos(a), math.sin(a)], atol=1e-12)
    assert spot.direction[1] < 0


def test_direction_is_unit():
    pose = solve_chain(JointAngles(33.0, 12.0, -80.0, 20.0, 71.0))
    assert np.linalg.norm(derive_spotlight(pose.lampshade).direction) == pytest.approx(1.0)


def test_direction_follows_shade_axis():
    pose = solve_chain(JointAngles(120.0, 50.0, -20.0, -45.0, 200.0))
    spot = derive_spotlight(pose.lampshade)
    h = LAMP_DIMENSIONS.lampshade_height
    neck = transform_point(pose.lampshade, np.array([0.0, 0.0, 0.0]))
    opening = transform_point(pose.lampshade, np.array([0.0, 0.0, h]))
    np.testing.assert_allclose(spot.direction, normalize(opening - neck), atol=1e-12)


def test_position_inside_the_shade():
    pose = solve_chain(JointAngles(0.0, 30.0, -60.0, -90.0, 0.0))
    spot = derive_spotlight(pose.lampshade)
    d = LAMP_DIMENSIONS
    expected = (pose.world_position("shade_joint")
                + (d.joint_radius + SPOTLIGHT_SETTINGS.depth_fraction * d.lampshade_height)
                * spot.direction)
    np.testing.assert_allclose(spot.position, expected, atol=1e-12)


def test_spin_does_not_change_the_beam():
    a = derive_spotlight(solve_chain(JointAngles(0.0, 30.0, -60.0, -90.0, 0.0)).lampshade)
    b = derive_spotlight(solve_chain(JointAngles(0.0, 30.0, -60.0, -90.0, 123.0)).lampshade)
    np.testing.assert_allclose(a.direction, b.direction, atol=1e-12)
    np.testing.assert_allclose(a.position, b.position, atol=1e-12)


def test_photometric_values_are_fixed():
    settings = SpotlightSettings(cutoff_deg=40.0, exponent=4.0)
    spot = derive_spotlight(solve_chain(JointAngles()).lampshade, settings=settings)
    assert spot.cutoff_deg == 40.0
    assert spot.exponent == 4.0
    assert spot.attenuation == SPOTLIGHT_SETTINGS.attenuation
    assert spot.cos_cutoff == pytest.approx(math.cos(math.radians(40.0)))


def test_disabled_spotlight_is_none():
    pose = solve_chain(JointAngles())
    assert spotlight_for_pose(pose, enabled=False) is None
    assert spotlight_for_pose(pose, enabled=True) is not None
