"""Data models for platform appearance signals and style variants."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

from .exceptions import ConfigurationError


class StyleVariant(Enum):
    """Built-in style variants."""
    LIGHT = "light"
    DARK = "dark"

    @property
    def display_name(self) -> str:
        """Get a user-friendly display name for the variant."""
        return self.value.title()


class PriorityTier(IntEnum):
    """
    Precedence levels in the style cascade.

    Higher values win when two tiers style the same property. The numbers
    match the GTK style provider priorities so tiers can be compared with
    what other toolkits use.
    """
    FALLBACK = 1
    THEME = 200
    SETTINGS = 400
    APPLICATION = 600
    USER = 800

    @classmethod
    def from_name(cls, name: str) -> "PriorityTier":
        """Parse a tier from its (case-insensitive) name."""
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise ConfigurationError(
                "styling.priority", name,
                f"Unknown priority tier '{name}', expected one of: "
                + ", ".join(tier.name.lower() for tier in cls)
            ) from None


@dataclass(frozen=True)
class ThemeSignal:
    """Snapshot of the platform's appearance state."""
    prefer_dark: bool = False
    theme_name: Optional[str] = ""

    def __post_init__(self):
        if self.theme_name is None:
            object.__setattr__(self, "theme_name", "")
        object.__setattr__(self, "prefer_dark", bool(self.prefer_dark))

    def __str__(self) -> str:
        return f"theme_name={self.theme_name!r}, prefer_dark={self.prefer_dark}"
