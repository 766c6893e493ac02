"""Discrete input commands and their application to JointState.

The input layer turns key presses into these values; the processor is
the only writer of the joint state.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from luxolamp.core.events import EventBus, EventType
from luxolamp.core.state import JointState, RotateDirection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectJoint:
    joint: int


@dataclass(frozen=True)
class Rotate:
    direction: RotateDirection


@dataclass(frozen=True)
class ToggleSpotlight:
    pass


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class Quit:
    pass


Command = Union[SelectJoint, Rotate, ToggleSpotlight, Reset, Quit]


class CommandProcessor:
    """Applies commands to a :class:`JointState` and announces the result.

    Every command is total: invalid selections and meaningless rotations
    are no-ops. ``handle`` returns False only for :class:`Quit`.
    """

    def __init__(self, state: JointState, event_bus: Optional[EventBus] = None) -> None:
        self.state = state
        self.event_bus = event_bus or EventBus()

    def handle(self, command: Command) -> bool:
        if isinstance(command, SelectJoint):
            self._select(command.joint)
        elif isinstance(command, Rotate):
            self._rotate(command.direction)
        elif isinstance(command, ToggleSpotlight):
            enabled = self.state.toggle_spotlight()
            logger.info("Spotlight: %s", "ON" if enabled else "OFF")
            self.event_bus.publish(EventType.SPOTLIGHT_TOGGLED, enabled=enabled)
        elif isinstance(command, Reset):
            self.state.reset()
            logger.info("Reset to default position")
            self.event_bus.publish(EventType.POSE_RESET, angles=self.state.angles.copy())
        elif isinstance(command, Quit):
            logger.info("Quit requested")
            self.event_bus.publish(EventType.QUIT_REQUESTED)
            return False
        else:
            raise TypeError(f"Unknown command {command!r}")
        return True

    def _select(self, n: int) -> None:
        if not self.state.select_joint(n):
            return
        joint = self.state.selected_joint
        logger.info("Selected: %s", joint.display_name)
        self.event_bus.publish(EventType.JOINT_SELECTED, joint=joint)

    def _rotate(self, direction: RotateDirection) -> None:
        name = self.state.rotate(direction)
        if name is None:
            return
        self.event_bus.publish(
            EventType.JOINT_ROTATED,
            joint=self.state.selected_joint,
            angle=name,
            value=getattr(self.state.angles, name),
        )
