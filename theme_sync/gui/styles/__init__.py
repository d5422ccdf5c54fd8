"""
Bundled style sheets for the light and dark variants.
"""

from .themes import Theme, StyleLoader
from .dark_theme import DarkTheme
from .light_theme import LightTheme

__all__ = ["Theme", "StyleLoader", "DarkTheme", "LightTheme"]
