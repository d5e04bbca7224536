"""Enumerations used by argument definitions and the parser."""

from __future__ import annotations

from enum import Enum


class OptionStyle(Enum):
    """How option flags are written on the command line."""

    STANDARD = 0
    """``-x`` short options (concatenable) and ``--long`` options."""
    SLASH = 1
    """Options start with ``/``."""
    DASH = 2
    """Options start with a single ``-`` followed by one or more characters."""


class OptionOperation(Enum):
    """What an option does to its value."""

    NONE = 0
    ASSIGN = 1
    APPEND = 2
    CLEAR = 3


class OptionType(Enum):
    """How an option affects processing of subsequent arguments."""

    NORMAL = 0
    HELP = 1
    STOP = 2
    EXIT = 3
    LAST_ARGUMENT = 4
    LAST_OPTION = 5


class ParserResultCode(Enum):
    """Overall outcome of parsing a command line."""

    NONE = 0
    SUCCESS = 1
    STOP = 2
    FAILURE = 3


class TextId(Enum):
    """Identifies a part of the help text or error text."""

    INITIAL_TEXT = 0
    USAGE_TITLE = 1
    USAGE = 2
    ABOUT = 3
    SUBCOMMANDS_TITLE = 4
    ARGUMENTS_TITLE = 5
    OPTIONS_TITLE = 6
    FINAL_TEXT = 7
    ERROR_USAGE = 8
    HELP = 9


def to_string(text_id: TextId) -> str:
    """Return the name of ``text_id``."""
    if not isinstance(text_id, TextId):
        raise TypeError(f"expected a TextId, got {type(text_id).__name__}")
    return text_id.name


class Visibility(Enum):
    """Where in the generated help text an item is shown.

    The values form a bit set: ``NORMAL`` is the union of ``USAGE`` and
    ``TEXT``, and ``&`` intersects two visibilities.
    """

    HIDDEN = 0
    USAGE = 1
    TEXT = 2
    NORMAL = 3

    def __and__(self, other: Visibility) -> Visibility:
        if not isinstance(other, Visibility):
            return NotImplemented
        return Visibility(self.value & other.value)