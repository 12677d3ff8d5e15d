"""
Tests for loading and saving the player templates file.

Uses pytest's tmp_path for real file I/O.
"""

import json
import logging

import pytest

from presets.src.schemas.service_results import ServiceErrorCodes
from presets.src.services import player_template_service
from presets.src.services.player_template_service import (
    load_player_templates,
    save_player_templates,
)
from presets.src.services.template_store import PlayerTemplates


class TestLoad:
    """Tests for load_player_templates."""

    def test_load_populates_builtin(self, store, write_templates_file, current_version_record):
        path = write_templates_file({"Version": 4, "PlayerTemplates": [current_version_record]})

        result = load_player_templates(store, path)

        assert result.success
        assert result.data == 1
        assert store.builtin[0].name == "Ice"
        assert store.custom == []

    def test_load_replaces_previous_builtin(self, store, write_templates_file, sample_template):
        store.replace_builtin([sample_template])
        path = write_templates_file({"Version": 4, "PlayerTemplates": [{"Name": "Fresh"}]})

        load_player_templates(store, path)

        assert [t.name for t in store.builtin] == ["Fresh"]

    def test_skipped_records_reported(self, store, write_templates_file):
        path = write_templates_file({
            "Version": 2,
            "PlayerTemplates": [{"Name": "Good"}, {"Face": "NoName"}, {"Name": "Also"}],
        })

        result = load_player_templates(store, path)

        assert result.success
        assert result.data == 2
        assert result.skipped_records == 1

    def test_missing_file(self, store, tmp_path, sample_template, caplog):
        """An unreadable file is logged and leaves the store as it was."""
        store.replace_builtin([sample_template])

        with caplog.at_level(logging.ERROR, logger="presets.services"):
            result = load_player_templates(store, tmp_path / "missing.json")

        assert not result.success
        assert result.error_code == ServiceErrorCodes.ACCESS_ERROR
        assert store.builtin == [sample_template]
        assert "Loading player templates failed" in caplog.messages

    @pytest.mark.parametrize("text", ["{not json", "", "[1, 2, 3]"])
    def test_unparseable_file(self, store, write_templates_file, text):
        result = load_player_templates(store, write_templates_file(text))

        assert not result.success
        assert result.error_code == ServiceErrorCodes.FORMAT_ERROR
        assert store.builtin == []

    def test_undecodable_file(self, store, tmp_path, sample_template):
        """Bytes that are not UTF-8 are a format problem, not an access problem."""
        store.replace_builtin([sample_template])
        path = tmp_path / "players.json"
        path.write_bytes(b'{"Version": 4, "PlayerTemplates": [{"Name": "\xff\xfe"}]}')

        result = load_player_templates(store, path)

        assert not result.success
        assert result.error_code == ServiceErrorCodes.FORMAT_ERROR
        assert store.builtin == [sample_template]

    def test_deeply_nested_file(self, store, write_templates_file):
        """Nesting too deep to decode comes back as a failed result."""
        path = write_templates_file("[" * 200000 + "]" * 200000)

        result = load_player_templates(store, path)

        assert not result.success
        assert result.error_code == ServiceErrorCodes.FORMAT_ERROR
        assert store.builtin == []

    def test_unknown_format(self, store, write_templates_file, sample_template):
        store.replace_builtin([sample_template])
        path = write_templates_file({"Version": 4, "Templates": []})

        result = load_player_templates(store, path)

        assert not result.success
        assert result.error_code == ServiceErrorCodes.SCHEMA_ERROR
        assert store.builtin == [sample_template]

    def test_newer_version_rejected(self, store, write_templates_file):
        path = write_templates_file({"Version": 5, "PlayerTemplates": [{"Name": "Future"}]})

        result = load_player_templates(store, path)

        assert result.error_code == ServiceErrorCodes.SCHEMA_ERROR
        assert store.builtin == []

    def test_default_path_from_settings(self, store, tmp_path, monkeypatch):
        path = tmp_path / "players.json"
        path.write_text(json.dumps({"Version": 4, "PlayerTemplates": [{"Name": "Configured"}]}))
        monkeypatch.setattr(
            player_template_service, "get_player_templates_path", lambda: path
        )

        result = load_player_templates(store)

        assert result.success
        assert store.builtin[0].name == "Configured"


class TestSave:
    """Tests for save_player_templates."""

    def test_save_writes_current_version(self, store, tmp_path, sample_template):
        store.replace_builtin([sample_template])
        path = tmp_path / "players.json"

        result = save_player_templates(store, path)

        assert result.success
        assert result.data == path
        document = json.loads(path.read_text())
        assert document["Version"] == 4
        assert document["PlayerTemplates"][0]["Name"] == "Commando"

    def test_custom_templates_not_saved(self, store, tmp_path, sample_template):
        store.add_custom(sample_template)
        path = tmp_path / "players.json"

        save_player_templates(store, path)

        assert json.loads(path.read_text())["PlayerTemplates"] == []

    def test_creates_missing_directory(self, store, tmp_path):
        path = tmp_path / "nested" / "dir" / "players.json"

        result = save_player_templates(store, path)

        assert result.success
        assert path.exists()

    def test_no_temp_file_left(self, store, tmp_path, sample_template):
        store.replace_builtin([sample_template])
        path = tmp_path / "players.json"

        save_player_templates(store, path)

        assert [p.name for p in tmp_path.iterdir()] == ["players.json"]

    def test_unwritable_destination(self, store, tmp_path, caplog):
        """A directory in the way of the file fails cleanly."""
        path = tmp_path / "players.json"
        path.mkdir()

        with caplog.at_level(logging.ERROR, logger="presets.services"):
            result = save_player_templates(store, path)

        assert not result.success
        assert result.error_code == ServiceErrorCodes.ACCESS_ERROR
        assert path.is_dir()
        assert not (tmp_path / "players.json.tmp").exists()
        assert "Saving player templates failed" in caplog.messages

    def test_failed_save_keeps_existing_file(self, store, tmp_path, sample_template, monkeypatch):
        path = tmp_path / "players.json"
        path.write_text("original")
        store.replace_builtin([sample_template])

        def fail_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(player_template_service.os, "replace", fail_replace)

        result = save_player_templates(store, path)

        assert not result.success
        assert path.read_text() == "original"
        assert not (tmp_path / "players.json.tmp").exists()

    def test_cleanup_failure_still_reported(self, store, tmp_path, monkeypatch):
        """A temp file that cannot be removed does not mask the write failure."""
        path = tmp_path / "players.json"

        def fail_replace(src, dst):
            raise OSError("disk full")

        def fail_unlink(self, missing_ok=False):
            raise OSError("busy")

        monkeypatch.setattr(player_template_service.os, "replace", fail_replace)
        monkeypatch.setattr(player_template_service.Path, "unlink", fail_unlink)

        result = save_player_templates(store, path)

        assert not result.success
        assert result.error_code == ServiceErrorCodes.ACCESS_ERROR
        assert not path.exists()


class TestSaveLoadCycle:
    """Saving then loading restores the built-in templates."""

    def test_cycle(self, tmp_path, current_version_record, write_templates_file):
        source = PlayerTemplates()
        load_player_templates(
            source,
            write_templates_file({"Version": 4, "PlayerTemplates": [current_version_record]}),
        )
        saved_path = tmp_path / "saved.json"
        save_player_templates(source, saved_path)

        restored = PlayerTemplates()
        load_player_templates(restored, saved_path)

        assert restored.builtin == source.builtin

    def test_legacy_file_upgraded_on_save(self, tmp_path, write_templates_file):
        source = PlayerTemplates()
        load_player_templates(
            source,
            write_templates_file({"PlayerTemplates": [{"Name": "Old", "Face": "Bob", "Legs": 3}]}),
        )
        saved_path = tmp_path / "saved.json"
        save_player_templates(source, saved_path)

        document = json.loads(saved_path.read_text())

        assert document["Version"] == 4
        assert document["PlayerTemplates"][0]["Face"] == "Jones"
        assert document["PlayerTemplates"][0]["FacehairType"] == "beard"
