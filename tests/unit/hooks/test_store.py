"""Tests for SettingsStore load/save behavior."""

import json
from pathlib import Path

import pytest

from claude_commander.exceptions import SettingsIOError, SettingsParseError
from claude_commander.hooks.store import SettingsStore


class TestLoad:
    def test_load_or_empty_missing_file(self, settings_path: Path):
        store = SettingsStore(settings_path)
        assert not store.exists()
        assert store.load_or_empty() == {}
        assert not settings_path.parent.exists()

    def test_load_existing(self, settings_path: Path, write_settings):
        write_settings({"model": "opus", "hooks": {}})
        assert SettingsStore(settings_path).load() == {"model": "opus", "hooks": {}}

    def test_invalid_json_raises_parse_error(self, settings_path: Path, write_settings):
        write_settings("{not json")
        with pytest.raises(SettingsParseError) as exc_info:
            SettingsStore(settings_path).load()
        assert "Failed to parse settings" in str(exc_info.value)
        assert exc_info.value.settings_path == settings_path

    def test_empty_file_is_a_parse_error(self, settings_path: Path, write_settings):
        write_settings("")
        with pytest.raises(SettingsParseError):
            SettingsStore(settings_path).load_or_empty()

    @pytest.mark.parametrize(
        ("document", "expected"), [("[]", []), ("42", 42), ('"text"', "text"), ("null", None)]
    )
    def test_non_object_top_level_is_returned_as_is(
        self, settings_path: Path, write_settings, document: str, expected
    ):
        write_settings(document)
        assert SettingsStore(settings_path).load() == expected

    def test_unreadable_path_raises_io_error(self, settings_path: Path):
        # A directory where the file should be
        settings_path.mkdir(parents=True)
        with pytest.raises(SettingsIOError) as exc_info:
            SettingsStore(settings_path).load()
        assert "Failed to read settings" in str(exc_info.value)


class TestSave:
    def test_creates_parent_directory(self, settings_path: Path):
        SettingsStore(settings_path).save({"a": 1})
        assert settings_path.exists()
        assert json.loads(settings_path.read_text()) == {"a": 1}

    def test_pretty_printed_with_trailing_newline(self, settings_path: Path):
        SettingsStore(settings_path).save({"a": {"b": 1}})
        assert settings_path.read_text() == '{\n  "a": {\n    "b": 1\n  }\n}\n'

    def test_non_ascii_is_kept_verbatim(self, settings_path: Path):
        SettingsStore(settings_path).save({"statusLine": "café ✓"})
        assert "café ✓" in settings_path.read_text(encoding="utf-8")

    def test_no_temp_files_left_behind(self, settings_path: Path):
        store = SettingsStore(settings_path)
        store.save({"a": 1})
        store.save({"a": 2})
        assert [p.name for p in settings_path.parent.iterdir()] == ["settings.json"]

    def test_replaces_existing_content(self, settings_path: Path, write_settings):
        write_settings({"old": True, "padding": "x" * 500})
        SettingsStore(settings_path).save({"new": True})
        assert json.loads(settings_path.read_text()) == {"new": True}

    def test_unserializable_document_leaves_file_untouched(
        self, settings_path: Path, write_settings
    ):
        write_settings({"keep": 1})
        before = settings_path.read_bytes()
        with pytest.raises(TypeError):
            SettingsStore(settings_path).save({"bad": object()})
        assert settings_path.read_bytes() == before

    def test_parent_is_a_file_raises_io_error(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        with pytest.raises(SettingsIOError):
            SettingsStore(blocker / "settings.json").save({})


class TestLocked:
    def test_lock_file_sits_beside_settings(self, settings_path: Path):
        store = SettingsStore(settings_path)
        assert store.lock_path == settings_path.with_name("settings.json.lock")

    def test_locked_creates_directory_and_lock_file(self, settings_path: Path):
        store = SettingsStore(settings_path)
        with store.locked():
            assert store.lock_path.exists()
        assert not settings_path.exists()

    def test_lock_released_after_block(self, settings_path: Path):
        store = SettingsStore(settings_path)
        with store.locked():
            store.save({"a": 1})
        with store.locked():
            store.save({"a": 2})
        assert store.load() == {"a": 2}
