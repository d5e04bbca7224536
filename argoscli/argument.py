"""Definitions of positional command line arguments."""

from __future__ import annotations

import copy as _copy
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Union

from .enums import Visibility
from .errors import ArgosException

TextCallback = Callable[[], str]
"""A function that produces a part of the help text."""

ArgumentCallback = Callable[["ArgumentView", str, Any], None]
"""Called with the argument's view, its raw value and a parsed-arguments builder."""

OptionCallback = Callable[[Any, str, Any], None]
"""Called with an option's view, its raw value and a parsed-arguments builder."""

HelpText = Union[str, TextCallback]


@dataclass
class _ArgumentData:
    name: str = ""
    help: HelpText = ""
    section: str = ""
    alias: str = ""
    callback: ArgumentCallback | None = None
    visibility: Visibility = Visibility.NORMAL
    id: int = 0
    min_count: int = 1
    max_count: int = 1
    value_id: int = 0
    argument_id: int = 0


def _resolve_help(help_value: HelpText) -> str:
    if callable(help_value):
        return help_value()
    return help_value


class ArgumentView:
    """Read-only access to an argument definition.

    The view refers to the definition itself, so later changes to the
    argument are visible through it.
    """

    __slots__ = ("_data",)

    def __init__(self, data: _ArgumentData) -> None:
        self._data = data

    def help_text(self) -> str:
        """Return the argument's help text, calling its text callback if any."""
        return _resolve_help(self._data.help)

    @property
    def name(self) -> str:
        return self._data.name

    @property
    def section(self) -> str:
        return self._data.section

    @property
    def alias(self) -> str:
        return self._data.alias

    @property
    def visibility(self) -> Visibility:
        return self._data.visibility

    @property
    def id(self) -> int:
        """The custom id assigned by client code."""
        return self._data.id

    @property
    def value_id(self) -> int:
        """Internal id of the value this argument assigns or appends to."""
        return self._data.value_id

    @property
    def argument_id(self) -> int:
        """Internal id that uniquely identifies this argument."""
        return self._data.argument_id

    @property
    def optional(self) -> bool:
        """True if the argument's minimum count is zero."""
        return self._data.min_count == 0

    @property
    def count(self) -> tuple[int, int]:
        """The argument's minimum and maximum counts."""
        return self._data.min_count, self._data.max_count

    @property
    def callback(self) -> ArgumentCallback | None:
        return self._data.callback

    def __repr__(self) -> str:
        return f"ArgumentView(name={self._data.name!r})"


class Argument:
    """Definition of a positional command line argument.

    All setters return the argument itself so calls can be chained.
    """

    def __init__(self, name: str = "") -> None:
        if not isinstance(name, str):
            raise TypeError("name must be a string")
        self._data = _ArgumentData(name=name)

    def help(self, text: HelpText) -> Argument:
        """Set the help text, either a string or a callable returning one."""
        if not isinstance(text, str) and not callable(text):
            raise TypeError("help text must be a string or a callable")
        self._data.help = text
        return self

    def section(self, name: str) -> Argument:
        """Set the heading the argument is listed under in the help text."""
        self._data.section = name
        return self

    def alias(self, alias: str) -> Argument:
        """Set an alternative name for retrieving the argument's value."""
        self._data.alias = alias
        return self

    def callback(self, callback: ArgumentCallback) -> Argument:
        """Set a function called each time the argument is encountered."""
        if not callable(callback):
            raise TypeError("callback must be callable")
        self._data.callback = callback
        return self

    def visibility(self, visibility: Visibility) -> Argument:
        """Restrict where the argument is shown in the help text."""
        if not isinstance(visibility, Visibility):
            raise TypeError("visibility must be a Visibility")
        self._data.visibility = visibility
        return self

    def id(self, value: int) -> Argument:
        """Set a custom id for client code; the parser ignores it."""
        self._data.id = int(value)
        return self

    def name(self, name: str) -> Argument:
        """Set the argument's name."""
        if not isinstance(name, str):
            raise TypeError("name must be a string")
        self._data.name = name
        return self

    def optional(self, optional: bool = True) -> Argument:
        """Make the argument optional (minimum count 0) or mandatory."""
        data = self._data
        if optional:
            data.min_count = 0
        elif data.min_count == 0:
            data.min_count = 1
            data.max_count = max(data.max_count, data.min_count)
        return self

    def mandatory(self, mandatory: bool = True) -> Argument:
        """Make the argument mandatory or optional."""
        return self.optional(not mandatory)

    def count(self, min_count: int, max_count: int | None = None) -> Argument:
        """Set how many times the argument must appear.

        With only ``min_count`` given it is both the minimum and the maximum.
        """
        if max_count is None:
            max_count = min_count
        if min_count < 0 or max_count < 0:
            raise ArgosException("Argument counts can not be negative.")
        if max_count == 0:
            raise ArgosException("max_count must be greater than 0.")
        if max_count < min_count:
            raise ArgosException(
                "max_count must be greater than or equal to min_count."
            )
        self._data.min_count = min_count
        self._data.max_count = max_count
        return self

    def copy(self) -> Argument:
        """Return an independent copy of this definition."""
        clone = Argument.__new__(Argument)
        clone._data = _copy.copy(self._data)
        return clone

    __copy__ = copy

    def view(self) -> ArgumentView:
        """Return a read-only view of this definition."""
        return ArgumentView(self._data)

    def __repr__(self) -> str:
        return f"Argument({self._data.name!r})"