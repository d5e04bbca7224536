"""Definitions of command line options."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field

from .argument import HelpText, OptionCallback, _resolve_help
from .enums import OptionOperation, OptionType, Visibility


@dataclass
class _OptionData:
    flags: list[str] = field(default_factory=list)
    help: HelpText = ""
    section: str = ""
    alias: str = ""
    callback: OptionCallback | None = None
    visibility: Visibility = Visibility.NORMAL
    id: int = 0
    operation: OptionOperation = OptionOperation.ASSIGN
    argument: str = ""
    initial_value: str = ""
    constant: str = ""
    type: OptionType = OptionType.NORMAL
    optional: bool = True
    value_id: int = 0
    argument_id: int = 0

    def clone(self) -> _OptionData:
        duplicate = _copy.copy(self)
        duplicate.flags = list(self.flags)
        return duplicate


def _check_flag(flag: object) -> str:
    if not isinstance(flag, str):
        raise TypeError("option flags must be strings")
    return flag


class OptionView:
    """Read-only access to an option definition.

    The view refers to the definition itself, so later changes to the
    option are visible through it.
    """

    __slots__ = ("_data",)

    def __init__(self, data: _OptionData) -> None:
        self._data = data

    def help_text(self) -> str:
        """Return the option's help text, calling its text callback if any."""
        return _resolve_help(self._data.help)

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
        """Internal id of the value this option assigns or appends to."""
        return self._data.value_id

    @property
    def argument_id(self) -> int:
        """Internal id that uniquely identifies this option."""
        return self._data.argument_id

    @property
    def operation(self) -> OptionOperation:
        return self._data.operation

    @property
    def flags(self) -> list[str]:
        return list(self._data.flags)

    @property
    def argument(self) -> str:
        return self._data.argument

    @property
    def initial_value(self) -> str:
        return self._data.initial_value

    @property
    def constant(self) -> str:
        """The constant, always stored as a string."""
        return self._data.constant

    @property
    def type(self) -> OptionType:
        return self._data.type

    @property
    def optional(self) -> bool:
        """False if the option is mandatory."""
        return self._data.optional

    @property
    def callback(self) -> OptionCallback | None:
        return self._data.callback

    def __repr__(self) -> str:
        return f"OptionView(flags={self._data.flags!r})"


class Option:
    """Definition of a command line option.

    An option needs at least one flag before a parser accepts it. All
    setters return the option itself so calls can be chained.
    """

    def __init__(self, *flags: str) -> None:
        self._data = _OptionData(flags=[_check_flag(f) for f in flags])

    def help(self, text: HelpText) -> Option:
        """Set the help text, either a string or a callable returning one."""
        if not isinstance(text, str) and not callable(text):
            raise TypeError("help text must be a string or a callable")
        self._data.help = text
        return self

    def section(self, name: str) -> Option:
        """Set the heading the option is listed under in the help text."""
        self._data.section = name
        return self

    def alias(self, alias: str) -> Option:
        """Set an alternative name for the value this option assigns to."""
        self._data.alias = alias
        return self

    def callback(self, callback: OptionCallback) -> Option:
        """Set a function called each time the option is encountered."""
        if not callable(callback):
            raise TypeError("callback must be callable")
        self._data.callback = callback
        return self

    def visibility(self, visibility: Visibility) -> Option:
        """Restrict where the option is shown in the help text."""
        if not isinstance(visibility, Visibility):
            raise TypeError("visibility must be a Visibility")
        self._data.visibility = visibility
        return self

    def id(self, value: int) -> Option:
        """Set a custom id for client code; the parser ignores it."""
        self._data.id = int(value)
        return self

    def operation(self, operation: OptionOperation) -> Option:
        """Set what the option does to its value (default ASSIGN)."""
        if not isinstance(operation, OptionOperation):
            raise TypeError("operation must be an OptionOperation")
        self._data.operation = operation
        return self

    def flag(self, flag: str) -> Option:
        """Make ``flag`` the option's only flag."""
        self._data.flags = [_check_flag(flag)]
        return self

    def flags(self, flags: list[str]) -> Option:
        """Replace the option's flags."""
        if isinstance(flags, str):
            raise TypeError("flags must be a sequence of strings")
        self._data.flags = [_check_flag(f) for f in flags]
        return self

    def argument(self, name: str) -> Option:
        """Name the option's argument, making the option take a value."""
        self._data.argument = name
        return self

    def initial_value(self, value: str) -> Option:
        """Set a value assigned to the option before parsing starts."""
        self._data.initial_value = value
        return self

    def constant(self, value: str | bool | int) -> Option:
        """Set the value the option assigns; booleans become "1" or "0"."""
        if isinstance(value, bool):
            text = "1" if value else "0"
        elif isinstance(value, int):
            text = str(value)
        elif isinstance(value, str):
            text = value
        else:
            raise TypeError("constant must be a string, bool or int")
        self._data.constant = text
        return self

    def type(self, option_type: OptionType) -> Option:
        """Set the option type (default NORMAL)."""
        if not isinstance(option_type, OptionType):
            raise TypeError("type must be an OptionType")
        self._data.type = option_type
        return self

    def optional(self, optional: bool = True) -> Option:
        """Make the option optional or mandatory."""
        self._data.optional = bool(optional)
        return self

    def mandatory(self, mandatory: bool = True) -> Option:
        """Make the option mandatory or optional."""
        return self.optional(not mandatory)

    def copy(self) -> Option:
        """Return an independent copy of this definition."""
        clone = Option.__new__(Option)
        clone._data = self._data.clone()
        return clone

    __copy__ = copy

    def view(self) -> OptionView:
        """Return a read-only view of this definition."""
        return OptionView(self._data)

    def __repr__(self) -> str:
        return f"Option(flags={self._data.flags!r})"