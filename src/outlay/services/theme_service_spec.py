from __future__ import annotations

"""
Tests for the theme preference and its YAML-backed store.
"""

from pathlib import Path

import pytest

from outlay.errors import PreferenceError
from outlay.services.theme_service import (
    PreferenceStore,
    Theme,
    ThemePreferenceService,
    system_prefers_dark,
)


@pytest.fixture
def store(tmp_path: Path) -> PreferenceStore:
    return PreferenceStore(tmp_path / "config" / "preferences.yml")


class DescribePreferenceStore:
    def it_should_return_none_for_missing_file(self, store):
        assert store.get("theme") is None

    def it_should_round_trip_a_value(self, store):
        store.set("theme", "dark")
        assert PreferenceStore(store.path).get("theme") == "dark"

    def it_should_keep_other_keys(self, store):
        store.set("other", "value")
        store.set("theme", "light")

        assert store.get("other") == "value"
        assert store.get("theme") == "light"

    def it_should_ignore_unreadable_file(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("theme: [unclosed", encoding="utf-8")

        assert store.get("theme") is None

    def it_should_raise_preference_error_when_unwritable(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        store = PreferenceStore(blocker / "preferences.yml")

        with pytest.raises(PreferenceError):
            store.set("theme", "dark")


class DescribeSystemPrefersDark:
    def it_should_default_to_light_without_signals(self):
        assert system_prefers_dark({}) is False

    def it_should_honour_explicit_override(self):
        assert system_prefers_dark({"OUTLAY_THEME": "dark"}) is True
        assert system_prefers_dark({"OUTLAY_THEME": "Light", "COLORFGBG": "15;0"}) is False

    def it_should_read_dark_terminal_background(self):
        assert system_prefers_dark({"COLORFGBG": "15;0"}) is True
        assert system_prefers_dark({"COLORFGBG": "15;default;0"}) is True

    def it_should_read_light_terminal_background(self):
        assert system_prefers_dark({"COLORFGBG": "0;15"}) is False


class DescribeThemePreferenceService:
    def it_should_prefer_stored_value(self, store):
        store.set("theme", "light")

        service = ThemePreferenceService(store, prefers_dark=lambda: True)

        assert service.theme == Theme.light

    def it_should_use_ambient_signal_when_nothing_stored(self, store):
        service = ThemePreferenceService(store, prefers_dark=lambda: True)
        assert service.theme == Theme.dark
        assert service.is_dark

    def it_should_default_to_light(self, store):
        service = ThemePreferenceService(store, prefers_dark=lambda: False)
        assert service.theme == Theme.light

    def it_should_ignore_unknown_stored_value(self, store):
        store.set("theme", "sepia")

        service = ThemePreferenceService(store, prefers_dark=lambda: True)

        assert service.theme == Theme.dark

    def it_should_toggle_and_persist(self, store):
        service = ThemePreferenceService(store, prefers_dark=lambda: False)

        assert service.toggle() == Theme.dark
        assert store.get("theme") == "dark"
        assert service.toggle() == Theme.light
        assert store.get("theme") == "light"

    def it_should_survive_into_next_session(self, store):
        ThemePreferenceService(store, prefers_dark=lambda: False).toggle()

        next_session = ThemePreferenceService(PreferenceStore(store.path), prefers_dark=lambda: False)

        assert next_session.theme == Theme.dark

    def it_should_set_explicit_theme(self, store):
        service = ThemePreferenceService(store, prefers_dark=lambda: False)

        service.set(Theme.dark)

        assert service.theme == Theme.dark
        assert store.get("theme") == "dark"
