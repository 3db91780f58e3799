"""Tests for persisted settings."""

import json

from rill.config import Settings


def test_load_missing_file_gives_defaults(tmp_path):
    settings = Settings.load(tmp_path / "nope.json")
    assert settings.show_full_tool_output is False
    assert settings.min_priority == 0.0
    assert settings.config_file == tmp_path / "nope.json"


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "sub" / "config.json"
    settings = Settings(config_file=path, min_priority=0.3, show_thinking=True)
    assert settings.save() is True

    data = json.loads(path.read_text())
    assert "config_file" not in data

    loaded = Settings.load(path)
    assert loaded.min_priority == 0.3
    assert loaded.show_thinking is True


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    settings = Settings.load(path)
    assert settings.show_full_tool_output is False
    assert settings.config_file == path


def test_save_failure_still_toggles(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    settings = Settings(config_file=blocker / "config.json")
    assert settings.save() is False
    assert settings.toggle_full_tool_output() is True
