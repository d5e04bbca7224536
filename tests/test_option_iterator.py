import copy

import pytest

from argoscli.errors import ArgosException
from argoscli.option_iterator import OptionIterator


def test_plain_arguments_returned_in_order():
    args = ["alpha", "beta", "gamma"]
    it = OptionIterator(args, "-")
    assert [it.next() for _ in args] == args
    assert it.next() is None


def test_empty_iterator():
    it = OptionIterator()
    assert it.next() is None
    assert it.next_value() is None
    assert it.remaining_arguments() == []


def test_flag_with_equals_is_split():
    flag, value = "--file", "data.txt"
    it = OptionIterator([f"{flag}={value}", "next"], "-")
    assert it.next() == flag + "="
    assert it.next_value() == value
    assert it.next() == "next"
    assert it.next() is None


def test_flag_with_equals_value_skipped_if_not_requested():
    flag = "--file"
    it = OptionIterator([f"{flag}=x", "after"], "-")
    assert it.next() == flag + "="
    assert it.next() == "after"


def test_next_value_consumes_following_argument():
    it = OptionIterator(["--file", "data.txt", "rest"], "-")
    assert it.next() == "--file"
    assert it.next_value() == "data.txt"
    assert it.next() == "rest"
    assert it.next() is None


def test_next_value_at_end_returns_none():
    it = OptionIterator(["--file"], "-")
    assert it.next() == "--file"
    assert it.next_value() is None
    assert it.next() is None


def test_short_token_not_split():
    token = "-="
    it = OptionIterator([token], "-")
    assert it.next() == token


def test_token_without_prefix_not_split():
    token = "a=b=c"
    it = OptionIterator([token], "-")
    assert it.next() == token


def test_slash_prefix():
    flag, value = "/out", "x"
    it = OptionIterator([f"{flag}={value}", "--no=split"], "/")
    assert it.next() == flag + "="
    assert it.next_value() == value
    assert it.next() == "--no=split"


def test_current_follows_position():
    it = OptionIterator(["--a", "v"], "-")
    assert it.current() == "--a"
    it.next()
    assert it.current() == "--a"
    it.next_value()
    assert it.current() == "v"


def test_current_raises_when_exhausted():
    it = OptionIterator(["x"], "-")
    it.next()
    it.next()
    with pytest.raises(ArgosException, match="There is no current argument."):
        it.current()


def test_remaining_arguments():
    args = ["--a", "b", "c"]
    it = OptionIterator(args, "-")
    assert it.remaining_arguments() == args
    it.next()
    assert it.remaining_arguments() == args[1:]
    it.next_value()
    assert it.remaining_arguments() == args[2:]
    it.next()
    assert it.remaining_arguments() == []


def test_remaining_arguments_with_pending_value():
    args = ["--a=1", "z"]
    it = OptionIterator(args, "-")
    it.next()
    assert it.remaining_arguments() == args[1:]


def test_copy_is_independent():
    args = ["one", "two", "three"]
    it = OptionIterator(args, "-")
    it.next()
    clone = it.copy()
    assert clone.remaining_arguments() == it.remaining_arguments()
    assert clone.next() == "two"
    assert it.remaining_arguments() == args[1:]
    assert it.next() == "two"
    assert it.next() == clone.next()


def test_copy_module_uses_copy():
    it = OptionIterator(["--k=v"], "-")
    it.next()
    clone = copy.copy(it)
    assert clone.next_value() == "v"
    assert it.next_value() == "v"


def test_input_list_not_shared():
    args = ["a", "b"]
    it = OptionIterator(args, "-")
    args.append("c")
    assert it.next() == "a"
    assert it.next() == "b"
    assert it.next() is None