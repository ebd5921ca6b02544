"""
test_config_manager.py
----------------------
Config loading, merging and fallbacks.
"""

import json

import pytest

from dino_runner.core.runtime.game_config import DEFAULT_CONFIG, load_game_config
from dino_runner.core.services.config_manager import get_indexed_files, load_config


DEFAULTS = {
    "physics": {"gravity": 0.6, "jump_force": 12.0},
    "score": {"interval": 100},
}


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_bundled_game_json_is_indexed():
    assert "game.json" in get_indexed_files()


def test_bundled_config_matches_defaults():
    config = load_game_config()

    assert config["physics"]["gravity"] == 0.6
    assert config["difficulty"]["base_spawn_interval"] == 1800
    assert "_notes" not in config
    assert set(DEFAULT_CONFIG) <= set(config)


def test_partial_file_merges_over_defaults(tmp_path):
    path = write_json(tmp_path / "custom.json", {"physics": {"gravity": 1.0}})

    config = load_config(path, DEFAULTS)

    assert config["physics"] == {"gravity": 1.0, "jump_force": 12.0}
    assert config["score"] == {"interval": 100}


def test_notes_keys_ignored(tmp_path):
    path = write_json(tmp_path / "notes.json", {"_notes": "hello", "score": {"interval": 50}})

    config = load_config(path, DEFAULTS)

    assert "_notes" not in config
    assert config["score"]["interval"] == 50


def test_defaults_not_mutated(tmp_path):
    path = write_json(tmp_path / "custom.json", {"physics": {"gravity": 2.0}})

    load_config(path, DEFAULTS)

    assert DEFAULTS["physics"]["gravity"] == 0.6


def test_missing_file_falls_back(tmp_path):
    config = load_config(str(tmp_path / "absent.json"), DEFAULTS)

    assert config == DEFAULTS
    assert config is not DEFAULTS


def test_malformed_file_falls_back(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    assert load_config(str(path), DEFAULTS) == DEFAULTS


def test_non_object_file_falls_back(tmp_path):
    path = write_json(tmp_path / "list.json", [1, 2, 3])

    assert load_config(path, DEFAULTS) == DEFAULTS


def test_strict_mode_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "absent.json"), DEFAULTS, strict=True)


def test_python_config_module(tmp_path):
    path = tmp_path / "tuning.py"
    path.write_text("DEFAULT_CONFIG = {'score': {'interval': 25}}\n", encoding="utf-8")

    config = load_config(str(path), DEFAULTS)

    assert config["score"]["interval"] == 25


def test_game_config_overrides():
    config = load_game_config(overrides={"physics": {"time_scaled": True}})

    assert config["physics"]["time_scaled"] is True
    assert config["physics"]["gravity"] == 0.6


def test_bare_name_ignores_working_directory_file(tmp_path, monkeypatch):
    write_json(tmp_path / "game.json", {"physics": {"gravity": 9.9}})
    monkeypatch.chdir(tmp_path)

    config = load_game_config("game.json")

    assert config["physics"]["gravity"] == 0.6


def test_relative_path_with_directory_is_read_directly(tmp_path, monkeypatch):
    (tmp_path / "tuning").mkdir()
    write_json(tmp_path / "tuning" / "game.json", {"physics": {"gravity": 0.9}})
    monkeypatch.chdir(tmp_path)

    config = load_config("tuning/game.json", DEFAULTS)

    assert config["physics"]["gravity"] == 0.9
