"""
Core styling logic: signal resolution, style binding and observation.
"""

from .binding import DisplayBinding
from .exceptions import (ConfigurationError, StyleResourceError,
                         SurfaceUnavailableError, ThemeSyncError)
from .interfaces import SettingsHandle, StyleSurface
from .models import PriorityTier, StyleVariant, ThemeSignal
from .observer import ObserverState, ThemeObserver, initialize_themed_styling
from .resolver import ThemeResolver, resolve_variant

__all__ = [
    "DisplayBinding",
    "ThemeSyncError",
    "SurfaceUnavailableError",
    "StyleResourceError",
    "ConfigurationError",
    "SettingsHandle",
    "StyleSurface",
    "PriorityTier",
    "StyleVariant",
    "ThemeSignal",
    "ObserverState",
    "ThemeObserver",
    "initialize_themed_styling",
    "ThemeResolver",
    "resolve_variant",
]
