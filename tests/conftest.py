"""
Pytest configuration and fixtures for Theme Sync tests.
"""

import os
import shutil
import tempfile
from pathlib import Path

import pytest

# Qt must not try to reach a display server during tests.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from theme_sync.config import Config
from theme_sync.core.interfaces import SettingsHandle, StyleSurface
from theme_sync.core.models import ThemeSignal
from theme_sync.utils.logging import setup_logging

setup_logging(level="DEBUG", log_file=None, log_to_console=False)


class FakeSurface(StyleSurface):
    """Records every style sheet pushed to it."""

    def __init__(self, initial: str = ""):
        self.sheet = initial
        self.history = []
        self._attached = []
        self._destroyed_callbacks = []

    def style_sheet(self) -> str:
        return self.sheet

    def set_style_sheet(self, text: str):
        self.sheet = text
        self.history.append(text)

    def on_destroyed(self, callback):
        self._destroyed_callbacks.append(callback)

    def attach(self, obj):
        self._attached.append(obj)

    def attached(self):
        return list(self._attached)

    def destroy(self):
        for callback in self._destroyed_callbacks:
            callback()


class FakeSettings(SettingsHandle):
    """Synchronous stand-in for the platform settings object."""

    def __init__(self, prefer_dark: bool = False, theme_name: str = "Adwaita"):
        self.signal = ThemeSignal(prefer_dark=prefer_dark, theme_name=theme_name)
        self.queries = 0
        self.prefer_dark_callbacks = []
        self.theme_name_callbacks = []

    def current_signal(self) -> ThemeSignal:
        self.queries += 1
        return self.signal

    def on_prefer_dark_changed(self, callback):
        self.prefer_dark_callbacks.append(callback)

    def on_theme_name_changed(self, callback):
        self.theme_name_callbacks.append(callback)

    def disconnect(self, callback):
        for callbacks in (self.prefer_dark_callbacks, self.theme_name_callbacks):
            if callback in callbacks:
                callbacks.remove(callback)

    def set_prefer_dark(self, value: bool):
        self.signal = ThemeSignal(prefer_dark=value, theme_name=self.signal.theme_name)
        self.fire_prefer_dark()

    def set_theme_name(self, name: str):
        self.signal = ThemeSignal(prefer_dark=self.signal.prefer_dark, theme_name=name)
        self.fire_theme_name()

    def fire_prefer_dark(self):
        for callback in list(self.prefer_dark_callbacks):
            callback()

    def fire_theme_name(self):
        for callback in list(self.theme_name_callbacks):
            callback()


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def settings():
    return FakeSettings()


@pytest.fixture
def sample_config():
    """Create a sample configuration for testing."""
    config = Config()
    config.ui.style = ""
    config.logging.file_path = ""
    return config


@pytest.fixture
def temp_directory():
    """Create a temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Clean environment variables for each test."""
    monkeypatch.delenv("GTK_THEME", raising=False)


@pytest.fixture(scope="session")
def qt_app():
    """A real QApplication on the offscreen platform."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


# Pytest markers
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "gui: marks tests that need a QApplication")
