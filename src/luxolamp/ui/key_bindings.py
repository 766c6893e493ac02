"""Keyboard to command mapping for the lamp viewport."""

from typing import Optional

from PySide6.QtCore import Qt

from luxolamp.core.commands import Command, Quit, Reset, Rotate, SelectJoint, ToggleSpotlight
from luxolamp.core.state import RotateDirection

KEY_COMMANDS: dict[Qt.Key, Command] = {
    Qt.Key.Key_1: SelectJoint(1),
    Qt.Key.Key_2: SelectJoint(2),
    Qt.Key.Key_3: SelectJoint(3),
    Qt.Key.Key_4: SelectJoint(4),
    Qt.Key.Key_Left: Rotate(RotateDirection.LEFT),
    Qt.Key.Key_Right: Rotate(RotateDirection.RIGHT),
    Qt.Key.Key_Up: Rotate(RotateDirection.UP),
    Qt.Key.Key_Down: Rotate(RotateDirection.DOWN),
    Qt.Key.Key_F: ToggleSpotlight(),
    Qt.Key.Key_R: Reset(),
    Qt.Key.Key_Escape: Quit(),
}

HELP_TEXT = (
    "Controls:",
    "  1-4: Select joint (Base, Lower Arm, Upper Arm, Lampshade)",
    "  Arrow Keys: Rotate selected joint",
    "  F: Toggle spotlight",
    "  R: Reset to default position",
    "  ESC: Exit",
)


def command_for_key(key: int) -> Optional[Command]:
    """The command bound to a Qt key code, or None for unbound keys.

    Letter keys match regardless of case since Qt reports the same code.
    """
    try:
        return KEY_COMMANDS.get(Qt.Key(key))
    except ValueError:
        return None
