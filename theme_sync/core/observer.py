"""
Keeps a surface's style in step with the platform appearance settings.

The observer listens on both platform channels (dark preference, theme
name) and funnels either one into the same resolve -> load -> replace pass.
"""

from enum import Enum
from typing import Callable, Optional

from ..utils.logging import get_logger
from .binding import DisplayBinding
from .exceptions import SurfaceUnavailableError
from .interfaces import SettingsHandle, StyleSurface
from .models import PriorityTier, StyleVariant
from .resolver import ThemeResolver

Dispatcher = Callable[[Callable[[], None]], None]


def _call_directly(func: Callable[[], None]):
    func()


class ObserverState(Enum):
    """Observer lifecycle state."""
    UNBOUND = "unbound"
    BOUND = "bound"


class ThemeObserver:
    """Drives a DisplayBinding from platform appearance notifications."""

    def __init__(self, binding: DisplayBinding, loader,
                 resolver: Optional[ThemeResolver] = None,
                 priority: PriorityTier = PriorityTier.APPLICATION,
                 dispatcher: Optional[Dispatcher] = None):
        self.binding = binding
        self.loader = loader
        self.resolver = resolver or ThemeResolver()
        self.priority = PriorityTier(priority)
        self.logger = get_logger(__name__)

        self._dispatch = dispatcher or _call_directly
        self._settings: Optional[SettingsHandle] = None
        self._state = ObserverState.UNBOUND
        self._current_variant: Optional[StyleVariant] = None
        self._refreshing = False
        self._pending = False

        self._on_prefer_dark = self._make_adapter("prefer-dark")
        self._on_theme_name = self._make_adapter("theme-name")

    @property
    def state(self) -> ObserverState:
        return self._state

    @property
    def is_bound(self) -> bool:
        return self._state is ObserverState.BOUND

    @property
    def current_variant(self) -> Optional[StyleVariant]:
        """Variant applied by the last pass, or None before the first one."""
        return self._current_variant

    def bind(self, settings: Optional[SettingsHandle]):
        """Subscribe to `settings` and apply the current style once."""
        if self.is_bound:
            self.logger.debug("Observer already bound, ignoring bind()")
            return
        if settings is None:
            self.logger.warning(
                "No platform settings available; running without custom styling"
            )
            return

        self._settings = settings
        settings.on_prefer_dark_changed(self._on_prefer_dark)
        settings.on_theme_name_changed(self._on_theme_name)
        self._state = ObserverState.BOUND
        self.refresh()
        self.logger.info(
            f"Theme observer bound at priority {self.priority.name}, "
            f"initial variant: {self._current_variant.display_name}"
        )

    def unbind(self, clear_style: bool = True):
        """Release subscriptions and optionally drop the applied style."""
        if not self.is_bound:
            return
        self._settings.disconnect(self._on_prefer_dark)
        self._settings.disconnect(self._on_theme_name)
        self._settings = None
        self._state = ObserverState.UNBOUND
        if clear_style:
            self.binding.clear(self.priority)
            self._current_variant = None
        self.logger.info("Theme observer unbound")

    def refresh(self):
        """
        Run a full pass against the current signal snapshot.

        A call arriving while a pass is running (for example a change event
        raised synchronously by installing the style sheet) is not executed
        recursively; the running pass repeats once it returns, using the
        latest snapshot.
        """
        if not self.is_bound:
            return
        if self._refreshing:
            self._pending = True
            return

        self._refreshing = True
        try:
            while True:
                self._pending = False
                self._run_pass()
                if not self._pending or not self.is_bound:
                    break
        finally:
            self._refreshing = False

    def _run_pass(self):
        signal = self._settings.current_signal()
        variant = self.resolver.resolve(signal)
        content = self.loader.load(variant)
        self.logger.debug(f"Resolved {signal} -> {variant.name}")

        self.binding.replace(content, self.priority)
        if variant is not self._current_variant:
            self.logger.info(f"Applied {variant.display_name} style")
        self._current_variant = variant

    def _make_adapter(self, channel: str) -> Callable[..., None]:
        # Signal payloads differ between channels; both just re-query.
        def adapter(*_args):
            self.logger.debug(f"Appearance change on '{channel}' channel")
            self._dispatch(self.refresh)

        adapter.__name__ = f"on_{channel.replace('-', '_')}_changed"
        return adapter


def initialize_themed_styling(surface: Optional[StyleSurface],
                              settings: Optional[SettingsHandle],
                              loader=None,
                              priority: PriorityTier = PriorityTier.APPLICATION,
                              dispatcher: Optional[Dispatcher] = None) -> None:
    """
    Attach light/dark styling that follows the platform to `surface`.

    Call once at startup, after the surface exists and before the first
    window is shown. Raises SurfaceUnavailableError if `surface` is None.
    Without `settings` the surface is left unstyled.

    A repeated call for a surface that already has a bound observer at
    `priority` does nothing. Observers at other priorities share the
    DisplayBinding of the bound ones, so their tiers compose in one sheet.
    """
    if surface is None:
        raise SurfaceUnavailableError(
            "Cannot initialize styling: no rendering surface available"
        )

    observers = [obj for obj in surface.attached()
                 if isinstance(obj, ThemeObserver) and obj.is_bound]
    if any(o.priority == priority for o in observers):
        get_logger(__name__).warning(
            f"Themed styling already initialized at priority "
            f"{PriorityTier(priority).name}, ignoring"
        )
        return

    binding = observers[0].binding if observers else DisplayBinding(surface)
    if loader is None:
        from ..gui.styles.themes import StyleLoader
        loader = StyleLoader()

    observer = ThemeObserver(binding, loader, priority=priority, dispatcher=dispatcher)
    observer.bind(settings)
    if not observer.is_bound:
        return

    surface.on_destroyed(lambda: observer.unbind(clear_style=False))
    surface.attach(observer)
