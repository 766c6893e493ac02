"""Main window: the lamp viewport plus a status bar mirroring the joint state."""

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QLabel, QMainWindow, QStatusBar

from luxolamp.constants import WINDOW_HEIGHT, WINDOW_WIDTH
from luxolamp.core.events import EventBus, EventType
from luxolamp.core.state import Joint, JointState, selected_joint_text, spotlight_text
from luxolamp.rendering.gl_widget import LampViewport


class MainWindow(QMainWindow):
    """Top-level window. Closes itself when a quit command arrives."""

    def __init__(
        self,
        event_bus: EventBus,
        state: JointState,
        viewport: LampViewport,
        parent=None,
    ):
        super().__init__(parent)
        self.event_bus = event_bus
        self.state = state
        self.viewport = viewport

        self.setWindowTitle("Pixar Luxo Lamp Animation")
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.setCentralWidget(viewport)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        font = QFont("Helvetica", 11)
        self.joint_label = QLabel(selected_joint_text(state.selected_joint))
        self.joint_label.setFont(font)
        self.spotlight_label = QLabel(spotlight_text(state.spotlight_enabled))
        self.spotlight_label.setFont(font)
        self.status_bar.addWidget(self.joint_label)
        self.status_bar.addWidget(self.spotlight_label)

        event_bus.subscribe(EventType.JOINT_SELECTED, self._on_joint_selected)
        event_bus.subscribe(EventType.SPOTLIGHT_TOGGLED, self._on_spotlight_toggled)
        event_bus.subscribe(EventType.QUIT_REQUESTED, self._on_quit)

        viewport.setFocus()

    def _on_joint_selected(self, joint: Joint, **kw):
        self.joint_label.setText(selected_joint_text(joint))

    def _on_spotlight_toggled(self, enabled: bool, **kw):
        self.spotlight_label.setText(spotlight_text(enabled))

    def _on_quit(self, **kw):
        self.close()

    def closeEvent(self, event):
        self.viewport.cleanup()
        super().closeEvent(event)
