# tests/unit/test_cli.py

import logging
from pathlib import Path
from typing import Iterator

import pytest
from PIL import Image

from glyph_maze.cli import build_parser, main


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_defaults_match_reference_size(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--seed", "3"]) == 0
    lines = capsys.readouterr().out.split("\n")[:-1]
    assert len(lines) == 25
    assert all(len(line) == 49 for line in lines)


@pytest.mark.parametrize("algorithm", ["sidewinder", "btree"])
def test_custom_size(algorithm: str, capsys: pytest.CaptureFixture[str]) -> None:
    argv = ["--rows", "3", "--cols", "5", "--algorithm", algorithm, "--seed", "1"]
    assert main(argv) == 0
    out = capsys.readouterr().out
    lines = out.split("\n")[:-1]
    assert len(lines) == 7
    assert all(len(line) == 21 for line in lines)
    assert lines[0].startswith("╔") and lines[0].endswith("╗")


def test_seed_reproduces_output(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--rows", "6", "--cols", "6", "--seed", "77"])
    first = capsys.readouterr().out
    main(["--rows", "6", "--cols", "6", "--seed", "77"])
    second = capsys.readouterr().out
    assert first == second


@pytest.mark.parametrize("argv", [["--rows", "0"], ["--cols", "-2"]])
def test_invalid_dimensions_exit_with_usage_error(
    argv: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "must be >= 1" in captured.err


def test_unknown_algorithm_rejected() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--algorithm", "prim"])
    assert excinfo.value.code == 2


def test_unknown_log_level_rejected() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--log-level", "chatty"])
    assert excinfo.value.code == 2


def test_image_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    target = tmp_path / "maze.png"
    argv = ["--rows", "4", "--cols", "4", "--seed", "0", "--image", str(target)]
    assert main(argv) == 0
    assert target.exists()
    with Image.open(target) as image:
        assert image.size[0] > 0 and image.size[1] > 0
    assert len(capsys.readouterr().out.split("\n")[:-1]) == 9


def test_debug_logging_goes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--rows", "2", "--cols", "2", "--seed", "0", "--log-level", "debug"])
    captured = capsys.readouterr()
    assert "passages" in captured.err
    assert "passages" not in captured.out


def test_parser_choices() -> None:
    parser = build_parser()
    args = parser.parse_args([])
    assert args.rows == 12 and args.cols == 12
    assert args.algorithm == "sidewinder"
    assert args.seed is None and args.image is None
