"""Tests for keyboard to command mapping."""

import pytest

pytest.importorskip("PySide6.QtCore")

from PySide6.QtCore import Qt

from luxolamp.core.commands import Quit, Reset, Rotate, SelectJoint, ToggleSpotlight
from luxolamp.core.state import RotateDirection
from luxolamp.ui.key_bindings import KEY_COMMANDS, command_for_key


@pytest.mark.parametrize("key, n", [
    (Qt.Key.Key_1, 1), (Qt.Key.Key_2, 2), (Qt.Key.Key_3, 3), (Qt.Key.Key_4, 4),
])
def test_number_keys_select(key, n):
    assert command_for_key(key) == SelectJoint(n)


def test_arrows():
    assert command_for_key(Qt.Key.Key_Left) == Rotate(RotateDirection.LEFT)
    assert command_for_key(Qt.Key.Key_Right) == Rotate(RotateDirection.RIGHT)
    assert command_for_key(Qt.Key.Key_Up) == Rotate(RotateDirection.UP)
    assert command_for_key(Qt.Key.Key_Down) == Rotate(RotateDirection.DOWN)


def test_letters_and_escape():
    assert command_for_key(Qt.Key.Key_F) == ToggleSpotlight()
    assert command_for_key(Qt.Key.Key_R) == Reset()
    assert command_for_key(Qt.Key.Key_Escape) == Quit()


def test_unbound_key():
    assert command_for_key(Qt.Key.Key_5) is None
    assert command_for_key(Qt.Key.Key_Space) is None


def test_accepts_plain_int_codes():
    assert command_for_key(int(Qt.Key.Key_3.value)) == SelectJoint(3)


def test_every_command_kind_is_bound():
    kinds = {type(cmd) for cmd in KEY_COMMANDS.values()}
    assert kinds == {SelectJoint, Rotate, ToggleSpotlight, Reset, Quit}
