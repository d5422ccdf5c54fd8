"""
Theme Sync - a window style sheet that follows the platform's light/dark preference.
"""

__version__ = "1.0.0"
__author__ = "Theme Sync Developers"
__email__ = "theme-sync@example.com"


def get_info() -> dict:
    """Returns basic application information."""
    return {
        "name": "Theme Sync",
        "version": __version__,
        "description": "Keeps a Qt window's style sheet in step with the system light/dark setting.",
        "author": __author__,
        "email": __email__,
    }


from .core.binding import DisplayBinding
from .core.exceptions import (ConfigurationError, StyleResourceError,
                              SurfaceUnavailableError, ThemeSyncError)
from .core.models import PriorityTier, StyleVariant, ThemeSignal
from .core.observer import ObserverState, ThemeObserver, initialize_themed_styling
from .core.resolver import ThemeResolver, resolve_variant

__all__ = [
    "__version__",
    "get_info",
    "DisplayBinding",
    "ThemeSyncError",
    "SurfaceUnavailableError",
    "StyleResourceError",
    "ConfigurationError",
    "PriorityTier",
    "StyleVariant",
    "ThemeSignal",
    "ObserverState",
    "ThemeObserver",
    "initialize_themed_styling",
    "ThemeResolver",
    "resolve_variant",
]
