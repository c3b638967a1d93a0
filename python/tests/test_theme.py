"""
Unit tests for theme preference handling.
"""

import json

import pytest

from passwright.theme import (
    ThemeState,
    ThemeStore,
    detect_system_prefers_dark,
    init_theme,
    reset_theme,
    toggle_theme,
)


class TestThemeStore:
    """Test settings file persistence."""

    @pytest.fixture
    def store(self, tmp_path):
        """Create a store inside a temporary directory."""
        return ThemeStore(tmp_path / "nested" / "settings.json")

    def test_load_missing_file(self, store):
        assert store.load() is None

    def test_save_and_load(self, store):
        """Test round trip through the settings file."""
        assert store.save("dark") is True
        assert store.load() == "dark"
        assert json.loads(store.path.read_text()) == {"theme": "dark"}

        store.save("light")
        assert store.load() == "light"

    def test_save_rejects_unknown_theme(self, store):
        with pytest.raises(ValueError):
            store.save("sepia")

    def test_corrupt_file_ignored(self, store):
        """Test unreadable settings read as no preference."""
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json")
        assert store.load() is None

        store.path.write_text(json.dumps({"theme": "neon"}))
        assert store.load() is None

        store.path.write_text(json.dumps(["dark"]))
        assert store.load() is None

    def test_clear(self, store):
        store.save("dark")
        assert store.clear() is True
        assert not store.path.exists()
        # Clearing twice is fine
        assert store.clear() is True

    def test_save_fails_when_parent_is_file(self, tmp_path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        store = ThemeStore(blocker / "settings.json")

        assert store.save("dark") is False
        assert store.load() is None

    def test_default_path_in_app_dir(self):
        store = ThemeStore()
        assert store.path.name == "settings.json"


class TestSystemPreference:
    """Test terminal background detection."""

    @pytest.mark.parametrize("value,expected", [
        ("15;0", True),
        ("15;default;0", True),
        ("7;8", True),
        ("0;15", False),
        ("0;7", False),
        ("default;default", False),
        ("", False),
    ])
    def test_colorfgbg(self, value, expected):
        assert detect_system_prefers_dark({"COLORFGBG": value}) is expected

    def test_unset(self):
        assert detect_system_prefers_dark({}) is False


class TestThemeState:
    """Test explicit theme initialisation and toggling."""

    @pytest.fixture
    def store(self, tmp_path):
        return ThemeStore(tmp_path / "settings.json")

    def test_init_uses_system_preference(self, store):
        state = init_theme(store, prefers_dark=True)
        assert state == ThemeState(dark=True, source="system")
        assert state.name == "dark"

        assert init_theme(store, prefers_dark=False).name == "light"

    def test_init_prefers_stored(self, store):
        """Test a stored choice wins over the system preference."""
        store.save("light")
        state = init_theme(store, prefers_dark=True)
        assert state == ThemeState(dark=False, source="stored")

    def test_init_has_no_side_effects(self, store):
        init_theme(store, prefers_dark=True)
        assert not store.path.exists()

    def test_toggle_persists(self, store):
        state = init_theme(store, prefers_dark=False)
        toggled = toggle_theme(state, store)

        assert toggled.dark is True
        assert toggled.source == "stored"
        assert store.load() == "dark"

        assert toggle_theme(toggled, store).name == "light"
        assert store.load() == "light"

    def test_toggle_keeps_state_when_save_fails(self, tmp_path):
        """Test an unsaved toggle does not report a stored theme."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        store = ThemeStore(blocker / "settings.json")

        state = ThemeState(dark=False, source="system")
        assert toggle_theme(state, store) == state
        assert store.load() is None

    def test_reset(self, store):
        store.save("dark")
        state = reset_theme(store, prefers_dark=False)
        assert state == ThemeState(dark=False, source="system")
        assert store.load() is None
