"""
Style resources for the built-in variants.
"""

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from ...core.exceptions import StyleResourceError
from ...core.models import StyleVariant
from ...utils.logging import get_logger


class Theme(ABC):
    """Abstract base class for a bundled style variant."""

    @abstractmethod
    def get_name(self) -> str:
        """Get theme name."""
        pass

    @abstractmethod
    def get_variant(self) -> StyleVariant:
        """Get the variant this theme provides."""
        pass

    @abstractmethod
    def get_stylesheet(self) -> str:
        """Get the Qt style sheet for this theme."""
        pass


def default_themes() -> List[Theme]:
    from .dark_theme import DarkTheme
    from .light_theme import LightTheme

    return [LightTheme(), DarkTheme()]


class StyleLoader:
    """
    Fixed lookup from StyleVariant to style sheet text.

    The set of themes is checked against StyleVariant when the loader is
    built, so `load` cannot miss for any variant.
    """

    def __init__(self, themes: Optional[Iterable[Theme]] = None):
        self.logger = get_logger(__name__)
        self._resources: Mapping[StyleVariant, str] = MappingProxyType(
            self._build(default_themes() if themes is None else themes)
        )

    def _build(self, themes: Iterable[Theme]) -> dict:
        resources = {}
        for theme in themes:
            variant = theme.get_variant()
            if variant in resources:
                raise StyleResourceError(
                    f"Duplicate style resource for variant '{variant.value}' "
                    f"({theme.get_name()})"
                )
            resources[variant] = theme.get_stylesheet()
            self.logger.debug(f"Registered style resource: {theme.get_name()}")

        missing = [variant.value for variant in StyleVariant if variant not in resources]
        if missing:
            raise StyleResourceError(
                f"No style resource for variant(s): {', '.join(missing)}"
            )
        return resources

    def load(self, variant: StyleVariant) -> str:
        """Get the style sheet for `variant`."""
        return self._resources[variant]

    def variants(self) -> List[StyleVariant]:
        return list(self._resources)
