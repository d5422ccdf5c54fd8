"""
Tests for ThemeObserver and initialize_themed_styling.
"""

from unittest.mock import Mock

import pytest

from conftest import FakeSettings, FakeSurface
from theme_sync.core.binding import DisplayBinding
from theme_sync.core.exceptions import SurfaceUnavailableError
from theme_sync.core.models import PriorityTier, StyleVariant, ThemeSignal
from theme_sync.core.observer import (ObserverState, ThemeObserver,
                                      initialize_themed_styling)
from theme_sync.gui.styles import StyleLoader

LIGHT_SHEET = StyleLoader().load(StyleVariant.LIGHT)
DARK_SHEET = StyleLoader().load(StyleVariant.DARK)


@pytest.fixture
def observer(surface):
    return ThemeObserver(DisplayBinding(surface), StyleLoader())


class TestThemeObserver:
    """Test the observer state machine and pipeline."""

    def test_starts_unbound(self, observer, surface):
        assert observer.state is ObserverState.UNBOUND
        assert observer.current_variant is None
        assert surface.history == []

    def test_bind_without_settings_stays_unbound(self, observer, surface):
        observer.bind(None)

        assert observer.state is ObserverState.UNBOUND
        assert surface.history == []

    def test_bind_applies_current_style(self, observer, surface, settings):
        observer.bind(settings)

        assert observer.state is ObserverState.BOUND
        assert observer.current_variant is StyleVariant.LIGHT
        assert surface.sheet == LIGHT_SHEET

    def test_bind_subscribes_both_channels(self, observer, settings):
        observer.bind(settings)

        assert len(settings.prefer_dark_callbacks) == 1
        assert len(settings.theme_name_callbacks) == 1

    def test_second_bind_is_noop(self, observer, settings):
        observer.bind(settings)
        observer.bind(settings)

        assert len(settings.prefer_dark_callbacks) == 1
        assert settings.queries == 1

    def test_prefer_dark_channel_switches_variant(self, observer, surface, settings):
        observer.bind(settings)
        settings.set_prefer_dark(True)

        assert observer.current_variant is StyleVariant.DARK
        assert surface.sheet == DARK_SHEET

    def test_theme_name_channel_switches_variant(self, observer, surface, settings):
        observer.bind(settings)
        settings.set_theme_name("Adwaita-dark")

        assert observer.current_variant is StyleVariant.DARK
        settings.set_theme_name("Adwaita")
        assert observer.current_variant is StyleVariant.LIGHT
        assert surface.sheet == LIGHT_SHEET

    def test_either_channel_requeries_full_signal(self, observer, settings):
        observer.bind(settings)
        # Change the name without notifying, then fire the other channel.
        settings.signal = ThemeSignal(prefer_dark=False, theme_name="Yaru-dark")
        settings.fire_prefer_dark()

        assert observer.current_variant is StyleVariant.DARK

    def test_repeated_notification_is_idempotent(self, observer, surface, settings):
        observer.bind(settings)
        settings.set_prefer_dark(True)
        settings.fire_prefer_dark()
        settings.fire_theme_name()

        assert surface.sheet == DARK_SHEET
        assert surface.history == [LIGHT_SHEET, DARK_SHEET]
        assert observer.binding.registration_count(observer.priority) == 1

    def test_notification_before_bind_is_ignored(self, observer, surface):
        observer.refresh()
        assert surface.history == []

    def test_unbind_releases_subscriptions_and_style(self, observer, surface, settings):
        observer.bind(settings)
        observer.unbind()

        assert observer.state is ObserverState.UNBOUND
        assert settings.prefer_dark_callbacks == []
        assert settings.theme_name_callbacks == []
        assert observer.binding.registration_count(observer.priority) == 0
        assert surface.sheet == ""

    def test_unbind_keep_style(self, observer, surface, settings):
        observer.bind(settings)
        observer.unbind(clear_style=False)

        assert surface.sheet == LIGHT_SHEET
        assert observer.current_variant is StyleVariant.LIGHT

    def test_custom_priority(self, surface, settings):
        binding = DisplayBinding(surface)
        observer = ThemeObserver(binding, StyleLoader(), priority=PriorityTier.USER)
        observer.bind(settings)

        assert binding.registration_count(PriorityTier.USER) == 1
        assert binding.registration_count(PriorityTier.APPLICATION) == 0

    def test_custom_resolver(self, surface, settings):
        resolver = Mock()
        resolver.resolve.return_value = StyleVariant.DARK
        observer = ThemeObserver(DisplayBinding(surface), StyleLoader(), resolver=resolver)
        observer.bind(settings)

        resolver.resolve.assert_called_once_with(settings.signal)
        assert surface.sheet == DARK_SHEET

    def test_dispatcher_routes_notifications(self, surface, settings):
        queued = []
        observer = ThemeObserver(DisplayBinding(surface), StyleLoader(),
                                 dispatcher=queued.append)
        observer.bind(settings)
        settings.set_prefer_dark(True)

        # Nothing happens until the dispatcher runs the queued call.
        assert observer.current_variant is StyleVariant.LIGHT
        assert len(queued) == 1
        queued.pop()()
        assert observer.current_variant is StyleVariant.DARK

    def test_adapters_ignore_signal_arguments(self, observer, settings):
        observer.bind(settings)
        settings.signal = ThemeSignal(prefer_dark=True, theme_name="Adwaita")
        settings.prefer_dark_callbacks[0]("unexpected", "payload")

        assert observer.current_variant is StyleVariant.DARK


class _ReentrantSurface(FakeSurface):
    """Surface that raises a theme change while a sheet is being installed."""

    def __init__(self, settings: FakeSettings):
        super().__init__()
        self.settings = settings
        self.depth = 0
        self.max_depth = 0
        self.trigger_once = True

    def set_style_sheet(self, text: str):
        self.depth += 1
        self.max_depth = max(self.max_depth, self.depth)
        try:
            super().set_style_sheet(text)
            if self.trigger_once and text == LIGHT_SHEET:
                self.trigger_once = False
                self.settings.set_theme_name("HighContrast-dark")
        finally:
            self.depth -= 1


class TestReentrancy:
    """Test notifications that arrive during a pass."""

    def test_nested_notification_is_queued_not_recursive(self, settings):
        surface = _ReentrantSurface(settings)
        observer = ThemeObserver(DisplayBinding(surface), StyleLoader())
        observer.bind(settings)

        assert surface.max_depth == 1
        assert surface.history == [LIGHT_SHEET, DARK_SHEET]
        assert observer.current_variant is StyleVariant.DARK


class TestInitializeThemedStyling:
    """Test the startup entry point."""

    def test_returns_none(self, surface, settings):
        assert initialize_themed_styling(surface, settings) is None

    def test_missing_surface_raises(self, settings):
        with pytest.raises(SurfaceUnavailableError):
            initialize_themed_styling(None, settings)

    def test_missing_settings_leaves_surface_unstyled(self, surface):
        initialize_themed_styling(surface, None)

        assert surface.sheet == ""
        assert surface.history == []
        assert surface.attached() == []

    def test_observer_attached_to_surface(self, surface, settings):
        initialize_themed_styling(surface, settings)

        assert len(surface.attached()) == 1
        assert surface.attached()[0].is_bound

    def test_surface_destruction_unbinds(self, surface, settings):
        initialize_themed_styling(surface, settings)
        surface.destroy()

        assert settings.prefer_dark_callbacks == []
        assert settings.theme_name_callbacks == []
        assert not surface.attached()[0].is_bound

    def test_end_to_end_light_to_dark(self, surface):
        settings = FakeSettings(prefer_dark=False, theme_name="Adwaita")
        initialize_themed_styling(surface, settings)
        binding = surface.attached()[0].binding
        assert surface.sheet == LIGHT_SHEET

        settings.set_theme_name("Adwaita-dark")
        assert surface.sheet == DARK_SHEET
        assert binding.registration_count(PriorityTier.APPLICATION) == 1

        # Same Dark-resolving values: nothing visible changes, no extra slot.
        settings.fire_prefer_dark()
        assert surface.sheet == DARK_SHEET
        assert surface.history == [LIGHT_SHEET, DARK_SHEET]
        assert len(binding.registrations()) == 1

    def test_custom_loader_and_priority(self, surface, settings):
        loader = Mock()
        loader.load.return_value = "/* custom */"
        initialize_themed_styling(surface, settings, loader=loader,
                                  priority=PriorityTier.SETTINGS)

        loader.load.assert_called_once_with(StyleVariant.LIGHT)
        assert surface.attached()[0].binding.content(PriorityTier.SETTINGS) == "/* custom */"

    def test_second_call_at_same_priority_is_ignored(self, surface, settings):
        initialize_themed_styling(surface, settings)
        initialize_themed_styling(surface, settings)

        assert len(surface.attached()) == 1
        assert surface.history == [LIGHT_SHEET]
        assert len(settings.prefer_dark_callbacks) == 1
        assert len(settings.theme_name_callbacks) == 1

    def test_other_priority_shares_binding(self, surface, settings):
        initialize_themed_styling(surface, settings)
        initialize_themed_styling(surface, settings, priority=PriorityTier.SETTINGS)
        first, second = surface.attached()
        assert first.binding is second.binding

        settings.set_prefer_dark(True)
        assert LIGHT_SHEET not in surface.sheet
        assert surface.sheet == first.binding.composed_style_sheet()
        assert set(first.binding.registrations()) == {
            PriorityTier.SETTINGS, PriorityTier.APPLICATION
        }

    def test_reinitialize_after_surface_destroyed(self, surface, settings):
        initialize_themed_styling(surface, settings)
        surface.destroy()
        initialize_themed_styling(surface, settings)

        assert len(surface.attached()) == 2
        assert surface.attached()[-1].is_bound
