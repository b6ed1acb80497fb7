from __future__ import annotations

import pytest

import project_config
from project_config import get_config, get_section, reload
from sudoku import EMBEDDED_PUZZLE, parse_grid


@pytest.fixture(autouse=True)
def _fresh_config():
    reload()
    yield
    reload()


def test_repository_config_carries_embedded_puzzle():
    assert parse_grid(get_section("sudoku.puzzle")) == parse_grid(EMBEDDED_PUZZLE)
    assert get_section("sudoku.done_marker") == "Done"
    assert get_section("tictactoe.first_player") == "X"
    assert get_section("events.enabled") is False


def test_missing_key_raises_without_default():
    with pytest.raises(KeyError):
        get_section("sudoku.missing")


def test_missing_key_returns_default_including_none():
    assert get_section("sudoku.missing", None) is None
    assert get_section("nope.deeper", 3) == 3


def test_env_override_points_at_another_file(tmp_path, monkeypatch):
    path = tmp_path / "alt.toml"
    path.write_text('[tictactoe]\nfirst_player = "O"\n', encoding="utf-8")
    monkeypatch.setenv("PUZZLES_CONFIG", str(path))
    reload()

    assert get_section("tictactoe.first_player") == "O"
    assert "sudoku" not in get_config()


def test_missing_file_yields_empty_config(tmp_path, monkeypatch):
    monkeypatch.setenv("PUZZLES_CONFIG", str(tmp_path / "absent.toml"))
    reload()
    assert project_config.get_config() == {}
    assert get_section("sudoku.done_marker", "Done") == "Done"
    with pytest.raises(KeyError):
        get_section("sudoku.done_marker")
