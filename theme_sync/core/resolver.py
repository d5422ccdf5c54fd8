"""Maps a platform appearance signal to a style variant."""

from .models import StyleVariant, ThemeSignal

DARK_MARKER = "dark"


def resolve_variant(signal: ThemeSignal) -> StyleVariant:
    """
    Pick the style variant for a platform signal.

    A theme name containing "dark" (any case) or an explicit dark preference
    selects DARK; anything else, including an empty theme name, is LIGHT.
    """
    theme_name = (signal.theme_name or "").lower()
    if DARK_MARKER in theme_name or signal.prefer_dark:
        return StyleVariant.DARK
    return StyleVariant.LIGHT


class ThemeResolver:
    """Injectable wrapper around `resolve_variant`."""

    def resolve(self, signal: ThemeSignal) -> StyleVariant:
        return resolve_variant(signal)
