"""EventBus for decoupled publish/subscribe communication."""

from collections import defaultdict
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    # Command results
    JOINT_SELECTED = auto()       # data: joint (Joint)
    JOINT_ROTATED = auto()        # data: joint (Joint), angle (str), value (float)
    SPOTLIGHT_TOGGLED = auto()    # data: enabled (bool)
    POSE_RESET = auto()           # data: angles (JointAngles)
    QUIT_REQUESTED = auto()

    # Frame events
    FRAME_UPDATE = auto()         # data: frame (SceneFrame)


class EventBus:
    """Simple publish/subscribe event system."""

    def __init__(self):
        self._handlers: dict[EventType, list[Callable]] = defaultdict(list)

    def subscribe(self, event_type: EventType, handler: Callable) -> None:
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: EventType, handler: Callable) -> None:
        handlers = self._handlers[event_type]
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event_type: EventType, **data: Any) -> None:
        for handler in list(self._handlers[event_type]):
            handler(**data)

    def clear(self) -> None:
        self._handlers.clear()
