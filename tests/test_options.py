import os
from unittest import mock

import pytest

from ascii_view.options import (
    DEFAULT_CHARACTER_RATIO,
    DEFAULT_EDGE_THRESHOLD,
    DEFAULT_MAX_HEIGHT,
    DEFAULT_MAX_WIDTH,
    PROG,
    Options,
    OptionsError,
    help_text,
    parse_args,
    terminal_size,
)


@mock.patch("os.isatty", return_value=False)
def test_defaults_without_terminal(_isatty):
    options = parse_args(["picture.png"])
    assert options == Options(
        file_path="picture.png",
        max_width=64,
        max_height=48,
        character_ratio=2.0,
        edge_threshold=4.0,
    )


@mock.patch("os.isatty", return_value=False)
def test_all_options_parsed(_isatty):
    options = parse_args(["img.jpg", "-mw", "100", "-mh", "30", "-et", "1.5", "-cr", "1.25"])
    assert options.file_path == "img.jpg"
    assert options.max_width == 100
    assert options.max_height == 30
    assert options.edge_threshold == 1.5
    assert options.character_ratio == 1.25


@mock.patch("os.isatty", return_value=False)
def test_unknown_options_are_ignored(_isatty):
    options = parse_args(["img.jpg", "--weird", "-mw", "10"])
    assert options.max_width == 10
    assert options.max_height == DEFAULT_MAX_HEIGHT


@mock.patch("os.isatty", return_value=False)
def test_numbers_read_like_c_conversions(_isatty):
    options = parse_args(["img.jpg", "-mw", "12abc", "-mh", "junk", "-et", "2.5x"])
    assert options.max_width == 12
    assert options.max_height == 0
    assert options.edge_threshold == 2.5


@mock.patch("os.isatty", return_value=False)
def test_option_value_consumed_even_if_it_looks_like_option(_isatty):
    options = parse_args(["img.jpg", "-mw", "-mh", "-mh", "7"])
    assert options.max_width == 0
    assert options.max_height == 7


@mock.patch("os.isatty", return_value=False)
def test_missing_value_raises(_isatty):
    with pytest.raises(OptionsError):
        parse_args(["img.jpg", "-mw"])


@mock.patch("os.isatty", return_value=False)
def test_negative_size_raises(_isatty):
    with pytest.raises(OptionsError):
        parse_args(["img.jpg", "-mh", "-3"])


@mock.patch("os.isatty", return_value=False)
def test_no_arguments_prints_help(_isatty, capsys):
    options = parse_args([])
    assert options.file_path is None
    assert capsys.readouterr().out == help_text(PROG)


@mock.patch("os.isatty", return_value=False)
def test_dash_h_prints_help(_isatty, capsys):
    options = parse_args(["-h", "img.png"])
    assert options.file_path is None
    assert capsys.readouterr().out.startswith("USAGE:\n")


def test_help_text_mentions_program_and_defaults():
    text = help_text("viewer")
    assert "\tviewer <path/to/image> [OPTIONS]" in text
    assert f"OR {DEFAULT_MAX_WIDTH})" in text
    assert f"OR {DEFAULT_MAX_HEIGHT})" in text
    assert f"(default: {DEFAULT_CHARACTER_RATIO:.1f})" in text
    assert f"(default: {DEFAULT_EDGE_THRESHOLD:.1f}, disabled)" in text


@mock.patch("os.get_terminal_size", return_value=os.terminal_size((120, 40)))
@mock.patch("os.isatty", return_value=True)
def test_terminal_size_used_as_default(_isatty, _size):
    assert terminal_size() == (120, 40)
    options = parse_args(["img.png"])
    assert (options.max_width, options.max_height) == (120, 40)


@mock.patch("os.get_terminal_size", return_value=os.terminal_size((120, 40)))
@mock.patch("os.isatty", return_value=True)
def test_explicit_size_beats_terminal(_isatty, _size):
    options = parse_args(["img.png", "-mw", "20"])
    assert (options.max_width, options.max_height) == (20, 40)


@mock.patch("os.get_terminal_size", side_effect=OSError("no tty"))
@mock.patch("os.isatty", return_value=True)
def test_terminal_size_failure_gives_none(_isatty, _size):
    assert terminal_size() is None


@mock.patch("os.isatty", return_value=False)
def test_terminal_size_without_tty_is_none(_isatty):
    assert terminal_size() is None