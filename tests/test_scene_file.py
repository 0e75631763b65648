"""Tests for scene list persistence."""
from pathlib import Path

import pytest

from shear.exceptions import InvalidInputError, OutputError
from shear.scene_file import read_scene_file, write_scene_file


def test_write_one_frame_per_line(tmp_path: Path) -> None:
    """Frames are written as decimal lines in the given order."""
    out = tmp_path / "scenes.txt"
    count = write_scene_file(out, [0, 100, 266, 432])
    assert count == 4
    assert out.read_text() == "0\n100\n266\n432\n"


def test_write_creates_parent_directories(tmp_path: Path) -> None:
    out = tmp_path / "nested" / "dir" / "scenes.txt"
    write_scene_file(out, [0])
    assert out.read_text() == "0\n"


def test_write_empty_list(tmp_path: Path) -> None:
    out = tmp_path / "scenes.txt"
    assert write_scene_file(out, []) == 0
    assert out.read_text() == ""


def test_write_failure_raises_output_error(tmp_path: Path) -> None:
    """A directory in place of the output file cannot be written."""
    out = tmp_path / "scenes.txt"
    out.mkdir()
    with pytest.raises(OutputError):
        write_scene_file(out, [0, 10])


def test_read_back(tmp_path: Path) -> None:
    out = tmp_path / "scenes.txt"
    write_scene_file(out, [0, 250, 500, 750])
    assert read_scene_file(out) == [0, 250, 500, 750]


def test_read_skips_blank_lines(tmp_path: Path) -> None:
    src = tmp_path / "scenes.txt"
    src.write_text("0\n\n120\n  \n")
    assert read_scene_file(src) == [0, 120]


def test_read_rejects_garbage(tmp_path: Path) -> None:
    src = tmp_path / "scenes.txt"
    src.write_text("0\nabc\n")
    with pytest.raises(InvalidInputError, match="scenes.txt:2"):
        read_scene_file(src)
