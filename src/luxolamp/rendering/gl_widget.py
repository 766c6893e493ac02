"""PySide6 QOpenGLWidget subclass bridging Qt input and lamp rendering."""

import logging
import traceback

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeyEvent, QSurfaceFormat
from PySide6.QtOpenGLWidgets import QOpenGLWidget

from luxolamp.core.commands import CommandProcessor
from luxolamp.core.events import EventType
from luxolamp.rendering.camera import Camera
from luxolamp.rendering.lights import LightSetup
from luxolamp.rendering.renderer import LampRenderer
from luxolamp.scene.scene_assembler import SceneAssembler
from luxolamp.ui.key_bindings import command_for_key

logger = logging.getLogger(__name__)

# Events after which the picture is stale
_REDRAW_EVENTS = (
    EventType.JOINT_SELECTED,
    EventType.JOINT_ROTATED,
    EventType.SPOTLIGHT_TOGGLED,
    EventType.POSE_RESET,
)


def create_gl_format() -> QSurfaceFormat:
    """Create an OpenGL 3.3 core-profile surface format with multisampling."""
    fmt = QSurfaceFormat()
    fmt.setVersion(3, 3)
    fmt.setProfile(QSurfaceFormat.OpenGLContextProfile.CoreProfile)
    fmt.setSamples(4)
    fmt.setDepthBufferSize(24)
    fmt.setSwapBehavior(QSurfaceFormat.SwapBehavior.DoubleBuffer)
    return fmt


class LampViewport(QOpenGLWidget):
    """Renders the lamp and turns key presses into commands.

    Repaints only when a command changed something, so an idle lamp
    costs nothing.
    """

    def __init__(
        self,
        processor: CommandProcessor,
        assembler: SceneAssembler,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self.setFormat(create_gl_format())
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        self.processor = processor
        self.assembler = assembler
        self.renderer = LampRenderer()
        self.camera = Camera()
        self.lights = LightSetup()

        for event_type in _REDRAW_EVENTS:
            processor.event_bus.subscribe(event_type, self._request_redraw)

    # ------------------------------------------------------------------
    # QOpenGLWidget overrides
    # ------------------------------------------------------------------

    def initializeGL(self) -> None:
        try:
            logger.info("LampViewport: initialising OpenGL.")
            self.renderer.init_gl()
        except Exception:
            logger.error("initializeGL failed:\n%s", traceback.format_exc())

    def resizeGL(self, w: int, h: int) -> None:
        # Framebuffer is in device pixels on HiDPI displays
        dpr = self.devicePixelRatio()
        self.camera.set_aspect(w, h)
        self.renderer.resize(int(w * dpr), int(h * dpr))

    def paintGL(self) -> None:
        try:
            frame = self.assembler.assemble(self.processor.state)
            self.renderer.render(frame, self.camera, self.lights)
            self.processor.event_bus.publish(EventType.FRAME_UPDATE, frame=frame)
        except Exception:
            logger.error("paintGL failed:\n%s", traceback.format_exc())

    # ------------------------------------------------------------------
    # Keyboard
    # ------------------------------------------------------------------

    def keyPressEvent(self, event: QKeyEvent) -> None:
        command = command_for_key(event.key())
        if command is None:
            super().keyPressEvent(event)
            return
        self.processor.handle(command)
        event.accept()

    # ------------------------------------------------------------------
    # Cleanup
    # ------------------------------------------------------------------

    def cleanup(self) -> None:
        """Release GL resources. Call before the widget is destroyed."""
        for event_type in _REDRAW_EVENTS:
            self.processor.event_bus.unsubscribe(event_type, self._request_redraw)
        self.makeCurrent()
        self.renderer.destroy()
        self.doneCurrent()

    def _request_redraw(self, **_kw) -> None:
        self.update()
