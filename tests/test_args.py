import logging

import pytest

from tinycli.args import Args
from tinycli.flag import Flag

VERBOSE = Flag(long="verbose", short="v")
OUTPUT = Flag(long="output", short="o", takes_value=True, default="out.txt")


def test_peek_in_and_out_of_range():
    args = Args(["build", "src"])
    assert args.peek(0) == "build"
    assert args.peek(1) == "src"
    assert args.peek(2) == ""
    assert args.peek(-1) == ""
    assert Args().peek(0) == ""


def test_peek_does_not_mutate():
    args = Args(["a", "b"])
    args.peek(0)
    args.peek(5)
    assert args.tokens == ["a", "b"]


def test_extract_boolean_flag():
    parameter, args = Args(["src", "--verbose", "dst"]).extract(VERBOSE)
    assert parameter.present is True
    assert parameter.value is True
    assert args == ["src", "dst"]


def test_extract_short_alias():
    parameter, args = Args(["-v", "src"]).extract(VERBOSE)
    assert parameter.present
    assert args == ["src"]


def test_extract_value_flag_removes_value():
    parameter, args = Args(["src", "--output", "dist", "dst"]).extract(OUTPUT)
    assert parameter.present
    assert parameter.value == "dist"
    assert args == ["src", "dst"]


def test_extract_inline_value():
    parameter, args = Args(["--output=dist", "src"]).extract(OUTPUT)
    assert parameter.value == "dist"
    assert args == ["src"]


def test_extract_absent_flag_returns_same_view():
    original = Args(["src", "dst"])
    parameter, args = original.extract(OUTPUT)
    assert parameter.present is False
    assert parameter.value == "out.txt"
    assert args is original


def test_extract_only_first_occurrence():
    """Repeated flags: one extraction removes only the first occurrence."""
    parameter, args = Args(["-o", "a", "--output", "b"]).extract(OUTPUT)
    assert parameter.value == "a"
    assert args == ["--output", "b"]


def test_extract_value_flag_at_end(caplog):
    """A value-taking flag in last position is present without a value."""
    with caplog.at_level(logging.WARNING, logger="tinycli"):
        parameter, args = Args(["src", "--output"]).extract(OUTPUT)
    assert parameter.present is True
    assert parameter.value is None
    assert args == ["src"]
    assert "expects a value" in caplog.text


def test_extract_does_not_mutate_original():
    original = Args(["--verbose", "src"])
    _, reduced = original.extract(VERBOSE)
    assert original.tokens == ["--verbose", "src"]
    assert reduced.tokens == ["src"]


def test_drop():
    args = Args(["build", "src"])
    assert args.drop(0) == ["src"]
    assert args.drop(5) is args


def test_args_sequence_protocol():
    args = Args(["a", "b"])
    assert len(args) == 2
    assert list(args) == ["a", "b"]
    assert args[1] == "b"
    assert repr(args) == "Args(['a', 'b'])"


def test_args_rejects_single_string():
    """A bare string is not split into characters."""
    with pytest.raises(TypeError):
        Args("build")
