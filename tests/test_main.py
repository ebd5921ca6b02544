"""
test_main.py
------------
Command-line parsing and wiring into the GameLoop.
"""

import random
from unittest.mock import patch

import pytest

from dino_runner.core.debug.debug_logger import LoggerConfig
from dino_runner.core.runtime.game_settings import Debug
from dino_runner.main import build_parser, main


@pytest.fixture(autouse=True)
def restore_globals(monkeypatch):
    monkeypatch.setattr(LoggerConfig, "LOG_LEVEL", LoggerConfig.LOG_LEVEL)
    monkeypatch.setattr(Debug, "HITBOX_VISIBLE", Debug.HITBOX_VISIBLE)


def test_parser_defaults():
    args = build_parser().parse_args([])

    assert args.config is None
    assert args.fps == 60
    assert args.time_scaled_physics is False
    assert args.seed is None


def test_rejects_non_positive_fps():
    assert main(["--fps", "0"]) == 2


def test_main_builds_loop_with_flags():
    with patch("dino_runner.core.runtime.game_loop.GameLoop") as mock_loop:
        result = main(["--fps", "30", "--time-scaled-physics", "--seed", "5",
                       "--log-level", "WARN", "--show-hitboxes"])

    assert result == 0
    config = mock_loop.call_args.args[0]
    assert config["physics"]["time_scaled"] is True
    assert mock_loop.call_args.kwargs["fps"] == 30
    assert mock_loop.call_args.kwargs["rng"].random() == pytest.approx(random.Random(5).random())
    mock_loop.return_value.run.assert_called_once()
    assert LoggerConfig.LOG_LEVEL == "WARN"
    assert Debug.HITBOX_VISIBLE is True


def test_default_config_is_bundled_file(tmp_path, monkeypatch):
    (tmp_path / "game.json").write_text('{"physics": {"gravity": 9.9}}', encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    with patch("dino_runner.core.runtime.game_loop.GameLoop") as mock_loop:
        main([])

    assert mock_loop.call_args.args[0]["physics"]["gravity"] == 0.6


def test_config_flag_reads_working_directory_file(tmp_path, monkeypatch):
    (tmp_path / "custom.json").write_text('{"physics": {"gravity": 0.9}}', encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    with patch("dino_runner.core.runtime.game_loop.GameLoop") as mock_loop:
        main(["--config", "custom.json"])

    assert mock_loop.call_args.args[0]["physics"]["gravity"] == 0.9
