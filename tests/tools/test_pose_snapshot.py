"""Tests for the headless pose snapshot tool."""

import numpy as np
import pytest

pytest.importorskip("PIL")

from luxolamp.core.config_loader import LampConfig
from luxolamp.core.state import Joint
from luxolamp.scene.scene_assembler import SceneAssembler
from tools.pose_snapshot import (
    build_state, describe_frame, main, orthographic_project, parse_args, render_frame,
)


def test_projection_front_view():
    pts = np.array([[1.0, 2.0, 3.0]])
    sx, sy, depth = orthographic_project(pts, azimuth=0.0, elevation=0.0)
    assert sx[0] == pytest.approx(1.0)
    assert sy[0] == pytest.approx(2.0)
    assert depth[0] == pytest.approx(3.0)


def test_projection_top_view_sees_height_as_depth():
    pts = np.array([[0.0, 5.0, 0.0]])
    _, sy, depth = orthographic_project(pts, azimuth=0.0, elevation=90.0)
    assert depth[0] == pytest.approx(5.0)
    assert sy[0] == pytest.approx(0.0, abs=1e-12)


def test_build_state_from_args():
    args = parse_args(["--lower", "45", "--upper", "-15", "--joint", "3", "--no-spotlight"])
    state = build_state(LampConfig(), args)
    assert state.angles.lower_arm_angle == 45.0
    assert state.angles.upper_arm_angle == -15.0
    assert state.angles.lampshade_tilt == -90.0
    assert state.selected_joint == Joint.UPPER_ARM
    assert state.spotlight_enabled is False


def test_describe_frame():
    frame = SceneAssembler().assemble(LampConfig().make_state())
    text = describe_frame(frame)
    assert text[0].startswith("Chain frames")
    assert "Spotlight: ON" in text


def test_render_frame(tmp_path):
    frame = SceneAssembler().assemble(LampConfig().make_state())
    out = tmp_path / "lamp.png"
    img = render_frame(frame, width=200, height=150, output_path=out)
    assert img.size == (200, 150)
    assert out.exists()
    assert np.asarray(img).max() > 0


def test_main_writes_png(tmp_path, capsys):
    out = tmp_path / "snap" / "pose.png"
    main(["--width", "120", "--height", "120", "--output", str(out)])
    assert out.exists()
    assert "Saved" in capsys.readouterr().out
