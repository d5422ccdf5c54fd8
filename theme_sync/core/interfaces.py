from abc import ABC, abstractmethod
from typing import Any, Callable, List

from .models import ThemeSignal

Callback = Callable[[], None]


class SettingsHandle(ABC):
    """Abstract access to the platform's appearance settings."""

    @abstractmethod
    def current_signal(self) -> ThemeSignal:
        """Return a fresh snapshot of the appearance state."""
        pass

    @abstractmethod
    def on_prefer_dark_changed(self, callback: Callback):
        """Call `callback` (no arguments) whenever the dark preference flips."""
        pass

    @abstractmethod
    def on_theme_name_changed(self, callback: Callback):
        """Call `callback` (no arguments) whenever the theme name changes."""
        pass

    def disconnect(self, callback: Callback):
        """Stop delivering notifications to `callback` (override if needed)."""
        pass


class StyleSurface(ABC):
    """A rendering surface that carries exactly one style sheet."""

    @abstractmethod
    def style_sheet(self) -> str:
        """Return the style sheet currently installed on the surface."""
        pass

    @abstractmethod
    def set_style_sheet(self, text: str):
        """Install `text` as the surface's style sheet, replacing the old one."""
        pass

    def on_destroyed(self, callback: Callback):
        """Call `callback` when the surface goes away (override if needed)."""
        pass

    def attach(self, obj: Any):
        """Keep `obj` alive for as long as the surface lives (override if needed)."""
        pass

    def attached(self) -> List[Any]:
        """Objects previously passed to `attach`."""
        return []
