"""
Qt implementations of the platform interfaces used by the styling core.
"""

import os
from typing import Any, Callable, List, Optional

from PySide6.QtCore import QEvent, QObject, Qt, Signal, Slot
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from ..core.interfaces import Callback, SettingsHandle, StyleSurface
from ..core.models import ThemeSignal
from ..utils.logging import get_logger

THEME_NAME_ENV = "GTK_THEME"
# Shared by every QtStyleSurface wrapping the same application
ATTACHED_ATTR = "_theme_sync_attached"


class QtStyleSurface(StyleSurface):
    """The application-wide style sheet of a QApplication."""

    def __init__(self, app: QApplication):
        self._app = app

    @property
    def app(self) -> QApplication:
        return self._app

    def style_sheet(self) -> str:
        return self._app.styleSheet()

    def set_style_sheet(self, text: str):
        self._app.setStyleSheet(text)

    def on_destroyed(self, callback: Callback):
        self._app.aboutToQuit.connect(callback)

    def attach(self, obj: Any):
        self._attachments().append(obj)

    def attached(self) -> List[Any]:
        return list(self._attachments())

    def _attachments(self) -> List[Any]:
        attachments = getattr(self._app, ATTACHED_ATTR, None)
        if attachments is None:
            attachments = []
            setattr(self._app, ATTACHED_ATTR, attachments)
        return attachments


class _ThemeChangeFilter(QObject):
    """Application-wide event filter that reports theme/style change events."""

    def __init__(self, on_change: Callable[[], None], parent: Optional[QObject] = None):
        super().__init__(parent)
        self._on_change = on_change

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if event.type() in (QEvent.Type.ThemeChange, QEvent.Type.StyleChange):
            self._on_change()
        return False


class QtSettingsHandle(SettingsHandle):
    """
    Appearance settings read from Qt.

    The dark preference comes from QStyleHints.colorScheme (Qt 6.5+). The
    theme name is taken from GTK_THEME when set, otherwise from the active
    widget style. Installing a style sheet wraps that style in a proxy with
    a blank name, so the last non-blank style name is kept. Theme/style
    change events reach every widget, so the theme-name channel only fires
    when the computed name actually differs.
    """

    def __init__(self, app: QGuiApplication):
        self.logger = get_logger(__name__)
        self._app = app
        self._hints = app.styleHints()
        self._prefer_dark_callbacks: List[Callback] = []
        self._theme_name_callbacks: List[Callback] = []
        self._style_name = self.style_name()
        self._last_theme_name = self.theme_name()
        self._filter: Optional[_ThemeChangeFilter] = None
        self._hints.colorSchemeChanged.connect(self._on_color_scheme_changed)

    def prefer_dark(self) -> bool:
        return self._hints.colorScheme() == Qt.ColorScheme.Dark

    def theme_name(self) -> str:
        env_name = os.environ.get(THEME_NAME_ENV, "").strip()
        if env_name:
            return env_name
        name = self.style_name()
        if name:
            self._style_name = name
        return self._style_name

    def style_name(self) -> str:
        """Name reported by the application's current QStyle."""
        if isinstance(self._app, QApplication):
            style = self._app.style()
            if style is not None:
                return style.name()
        return ""

    def current_signal(self) -> ThemeSignal:
        return ThemeSignal(prefer_dark=self.prefer_dark(), theme_name=self.theme_name())

    def on_prefer_dark_changed(self, callback: Callback):
        self._prefer_dark_callbacks.append(callback)

    def on_theme_name_changed(self, callback: Callback):
        self._theme_name_callbacks.append(callback)
        if self._filter is None:
            self._filter = _ThemeChangeFilter(self.check_theme_name)
            self._app.installEventFilter(self._filter)

    def disconnect(self, callback: Callback):
        for callbacks in (self._prefer_dark_callbacks, self._theme_name_callbacks):
            if callback in callbacks:
                callbacks.remove(callback)
        if not self._theme_name_callbacks and self._filter is not None:
            self._app.removeEventFilter(self._filter)
            self._filter = None

    def check_theme_name(self):
        """Notify theme-name subscribers if the name changed since last seen."""
        name = self.theme_name()
        if name == self._last_theme_name:
            return
        self.logger.debug(f"Theme name changed: {self._last_theme_name!r} -> {name!r}")
        self._last_theme_name = name
        for callback in list(self._theme_name_callbacks):
            callback()

    def _on_color_scheme_changed(self, scheme):
        self.logger.debug(f"Color scheme changed: {scheme}")
        for callback in list(self._prefer_dark_callbacks):
            callback()


class GuiThreadDispatcher(QObject):
    """
    Runs callables on the thread that owns the application.

    Emitting from the GUI thread delivers directly; emitting from any other
    thread is queued onto the GUI event loop.
    """

    _requested = Signal(object)

    def __init__(self, app: QGuiApplication):
        super().__init__()
        self.moveToThread(app.thread())
        self._requested.connect(self._run)

    def __call__(self, func: Callable[[], None]):
        self._requested.emit(func)

    @Slot(object)
    def _run(self, func):
        func()


def get_default_surface() -> Optional[QtStyleSurface]:
    """Wrap the running QApplication, or None if there is none."""
    app = QApplication.instance()
    if not isinstance(app, QApplication):
        return None
    return QtStyleSurface(app)


def get_platform_settings() -> Optional[QtSettingsHandle]:
    """Settings for the running application, or None if Qt cannot report them."""
    app = QGuiApplication.instance()
    if app is None:
        return None
    if not hasattr(app.styleHints(), "colorScheme"):
        get_logger(__name__).warning("Qt does not report a color scheme (needs Qt 6.5+)")
        return None
    return QtSettingsHandle(app)
