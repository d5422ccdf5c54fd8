"""Exception hierarchy for the styling core."""


class ThemeSyncError(Exception):
    """Base class for all Theme Sync errors."""
    pass


class SurfaceUnavailableError(ThemeSyncError):
    """No rendering surface exists to attach style sheets to."""

    def __init__(self, message: str = "No rendering surface available"):
        super().__init__(message)


class StyleResourceError(ThemeSyncError):
    """The bundled style resources do not cover every style variant."""
    pass


class ConfigurationError(ThemeSyncError):
    """A configuration value could not be interpreted."""

    def __init__(self, key: str, value, message: str = ""):
        self.key = key
        self.value = value
        super().__init__(message or f"Invalid value for '{key}': {value!r}")
