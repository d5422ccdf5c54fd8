"""
Main application class for Theme Sync.
"""

import sys
from typing import List, Optional

from PySide6.QtWidgets import QApplication

from .config import Config
from .core.exceptions import ThemeSyncError
from .core.observer import initialize_themed_styling
from .gui.main_window import MainWindow
from .gui.platform import (GuiThreadDispatcher, QtStyleSurface,
                           get_default_surface, get_platform_settings)
from .utils.logging import get_logger


class ThemeSyncApp:
    """Main application class that coordinates all components."""

    def __init__(self, config: Config):
        """Initialize the application with configuration."""
        self.config = config
        self.logger = get_logger(__name__)
        self.qt_app: Optional[QApplication] = None
        self.surface: Optional[QtStyleSurface] = None
        self.main_window: Optional[MainWindow] = None

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the application and return exit code."""
        try:
            self.startup(argv)
        except ThemeSyncError as e:
            self.logger.error(f"Failed to start application: {e}")
            return 1

        self.main_window.show()
        self.logger.info("Application started successfully")
        return self.qt_app.exec()

    def startup(self, argv: Optional[List[str]] = None):
        """Create the Qt application, style it and build the window (not shown)."""
        self.logger.info("Initializing Qt application...")

        self.qt_app = QApplication.instance() or QApplication(sys.argv if argv is None else argv)
        self.qt_app.setApplicationName(self.config.ui.window_title)
        self.qt_app.setDesktopFileName(self.config.ui.application_id)
        if self.config.ui.style:
            self.qt_app.setStyle(self.config.ui.style)

        self.surface = get_default_surface()
        if self.config.styling.follow_system:
            settings = get_platform_settings()
        else:
            self.logger.info("Following the system theme is disabled in config")
            settings = None

        # Styling has to be in place before the first paint.
        initialize_themed_styling(
            self.surface,
            settings,
            priority=self.config.styling.priority_tier,
            dispatcher=GuiThreadDispatcher(self.qt_app),
        )

        self.main_window = MainWindow(self.config)
        self.qt_app.aboutToQuit.connect(self._on_shutdown)

    def _on_shutdown(self):
        """Handle application shutdown."""
        self.logger.info("Application shutting down...")
