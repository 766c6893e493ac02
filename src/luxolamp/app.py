"""luxolamp application entry point.

Wires together the joint state, command processing, scene assembly,
rendering and the window.
"""

# Disable PyOpenGL's per-call error checking BEFORE any GL imports.
# Some drivers leave stale GL errors that make the checker raise on
# every call.
import OpenGL
OpenGL.ERROR_CHECKING = False

import logging
import sys

from PySide6.QtGui import QSurfaceFormat
from PySide6.QtWidgets import QApplication

from luxolamp.core.commands import CommandProcessor
from luxolamp.core.config_loader import LampConfig, load_lamp_config
from luxolamp.core.events import EventBus
from luxolamp.rendering.gl_widget import LampViewport, create_gl_format
from luxolamp.scene.scene_assembler import SceneAssembler
from luxolamp.ui.key_bindings import HELP_TEXT
from luxolamp.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def load_config_or_defaults() -> LampConfig:
    """lamp.json if present, the built-in lamp otherwise."""
    try:
        return load_lamp_config()
    except FileNotFoundError:
        logger.warning("No lamp config found, using built-in defaults")
        return LampConfig()


def main():
    """Launch the lamp viewer."""
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    # Set OpenGL format before creating QApplication
    QSurfaceFormat.setDefaultFormat(create_gl_format())
    app = QApplication(sys.argv)

    config = load_config_or_defaults()
    event_bus = EventBus()
    state = config.make_state()
    processor = CommandProcessor(state, event_bus)
    assembler = SceneAssembler(config.dimensions, config.spotlight)

    viewport = LampViewport(processor, assembler)

    window = MainWindow(event_bus, state, viewport)

    logger.info("Pixar Luxo Lamp Animation")
    for line in HELP_TEXT:
        logger.info(line)

    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
