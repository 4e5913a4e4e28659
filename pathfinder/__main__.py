"""Main entry point for the Pathfinding Visualizer."""

import logging
import os
import sys

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication

from .app.config import configure_logging, parse_args

logger = logging.getLogger("pathfinder")


def main(argv=None):
    """Main entry point for the application."""
    config = parse_args(argv)
    configure_logging(config.log_level)

    # Disable DPI scaling so tiles stay pixel-aligned
    os.environ.setdefault('QT_AUTO_SCREEN_SCALE_FACTOR', '0')
    os.environ.setdefault('QT_SCALE_FACTOR', '1')
    os.environ.setdefault('QT_LOGGING_RULES', 'qt.qpa.backingstore=false')

    QApplication.setHighDpiScaleFactorRoundingPolicy(Qt.HighDpiScaleFactorRoundingPolicy.Floor)

    app = QApplication(sys.argv[:1])
    app.setApplicationName("Pathfinding Visualizer")
    app.setApplicationVersion("1.0.0")

    # Import UI components (after QApplication is created)
    from .app.controller import PathfinderController
    from .ui.main_window import MainWindow

    controller = PathfinderController(config)
    window = MainWindow(controller)

    try:
        window.show()
        logger.info("Started with a %dx%d grid", config.grid_size, config.grid_size)
        return app.exec()
    except Exception:
        logger.exception("Application error")
        return 1
    finally:
        controller.cancel_run()


if __name__ == "__main__":
    sys.exit(main())
