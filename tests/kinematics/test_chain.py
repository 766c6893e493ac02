"""Tests for the forward kinematic chain."""

import math

import numpy as np
import pytest

from luxolamp.constants import LAMP_DIMENSIONS, LampDimensions
from luxolamp.core.state import JointAngles
from luxolamp.kinematics.chain import CHAIN_STEPS, KinematicChain, solve_chain


def _deg(a):
    return math.radians(a)


def test_all_steps_present_in_order():
    pose = solve_chain(JointAngles())
    assert [name for name, _ in pose] == list(CHAIN_STEPS)


def test_rest_pose_stacks_straight_up():
    d = LAMP_DIMENSIONS
    pose = solve_chain(JointAngles())
    np.testing.assert_allclose(pose.world_position("lower_joint"), [0, d.base_height, 0])
    np.testing.assert_allclose(
        pose.world_position("shade_joint"),
        [0, d.base_height + d.lower_arm_length + d.upper_arm_length, 0],
    )


def test_scenario_upper_arm_end_height():
    angles = JointAngles(0.0, 45.0, -60.0, -30.0, 0.0)
    pose = solve_chain(angles)
    expected_y = 0.3 + 3.0 * math.cos(_deg(45)) + 2.5 * math.cos(_deg(45 - 60))
    assert pose.upper_arm_end[1, 3] == pytest.approx(expected_y, abs=1e-4)


def test_arm_bends_toward_positive_z():
    pose = solve_chain(JointAngles(lower_arm_angle=45.0))
    end = pose.world_position("upper_joint")
    assert end[2] == pytest.approx(3.0 * math.sin(_deg(45)))
    assert end[0] == pytest.approx(0.0, abs=1e-12)


def test_base_rotation_turns_the_whole_lamp():
    bent = JointAngles(lower_arm_angle=45.0)
    turned = JointAngles(base_rotation=90.0, lower_arm_angle=45.0)
    a = solve_chain(bent).world_position("upper_joint")
    b = solve_chain(turned).world_position("upper_joint")
    # +Z swings to +X under a right-handed Y rotation
    np.testing.assert_allclose(b, [a[2], a[1], 0.0], atol=1e-12)


def test_deterministic():
    angles = JointAngles(12.0, 33.0, -71.0, -20.0, 140.0)
    a = solve_chain(angles)
    b = solve_chain(angles)
    for name in CHAIN_STEPS:
        np.testing.assert_array_equal(a.frame(name), b.frame(name))


def test_frames_are_rigid():
    pose = solve_chain(JointAngles(10.0, 20.0, -30.0, 40.0, 50.0))
    for _, m in pose:
        r = m[:3, :3]
        np.testing.assert_allclose(r @ r.T, np.eye(3), atol=1e-12)
        assert np.linalg.det(r) == pytest.approx(1.0)


def test_frames_are_read_only():
    pose = solve_chain(JointAngles())
    with pytest.raises(ValueError):
        pose.lampshade[0, 0] = 2.0


def test_unknown_frame():
    with pytest.raises(KeyError):
        solve_chain(JointAngles()).frame("elbow")


def test_lampshade_mount_offset_is_joint_radius():
    d = LAMP_DIMENSIONS
    pose = solve_chain(JointAngles())
    gap = pose.world_position("shade_mount") - pose.world_position("shade_joint")
    np.testing.assert_allclose(gap, [0, d.joint_radius, 0], atol=1e-12)


def test_custom_dimensions():
    d = LampDimensions(base_height=1.0, lower_arm_length=2.0, upper_arm_length=1.0)
    pose = KinematicChain(d).solve(JointAngles())
    assert pose.world_position("shade_joint")[1] == pytest.approx(4.0)


def test_root_transform():
    root = np.eye(4)
    root[0, 3] = 5.0
    pose = KinematicChain().solve(JointAngles(), root=root)
    assert pose.world_position("base")[0] == pytest.approx(5.0)


def test_local_steps_compose_to_lampshade():
    angles = JointAngles(15.0, 20.0, -40.0, -60.0, 30.0)
    chain = KinematicChain()
    m = np.eye(4)
    for _, local in chain.local_steps(angles):
        m = m @ local
    np.testing.assert_allclose(m, chain.solve(angles).lampshade)
