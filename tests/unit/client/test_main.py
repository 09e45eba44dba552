"""Tests for the command line entry point."""

from __future__ import annotations

import logging

import pytest

from rogue_dungeon.client.main import main


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestDump:
    def test_prints_map(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--dump", "--seed", "7"])
        lines = capsys.readouterr().out.rstrip("\n").split("\n")
        assert len(lines) == 46
        assert all(len(line) == 80 for line in lines[:45])
        assert lines[-1].startswith("Seed: 7 | Spawn: (")

    def test_same_seed_same_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--dump", "--seed", "11"])
        first = capsys.readouterr().out
        main(["--dump", "--seed", "11"])
        assert capsys.readouterr().out == first

    def test_custom_size(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--dump", "--seed", "1", "--width", "30", "--height", "20", "--max-rooms", "5"])
        lines = capsys.readouterr().out.rstrip("\n").split("\n")
        assert len(lines) == 21
        assert len(lines[0]) == 30

    def test_log_file(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        log_file = tmp_path / "dungeon.log"
        main(["--dump", "--seed", "3", "--log", str(log_file)])
        capsys.readouterr()
        logging.getLogger().handlers[-1].close()
        assert "Generated 80x45 dungeon" in log_file.read_text()


class TestInvalidConfig:
    def test_rooms_too_large(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--dump", "--room-min-size", "12", "--room-max-size", "8"])
        assert exc_info.value.code == 2
        assert "room_min_size" in capsys.readouterr().err
