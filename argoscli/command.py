"""Definitions of commands and sub-commands."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Union

from .argument import Argument, ArgumentView
from .enums import TextId, Visibility
from .errors import ArgosException
from .option import Option, OptionView

TextSource = Union[str, Callable[[], str]]


def _check_text(text: object) -> TextSource:
    if not isinstance(text, str) and not callable(text):
        raise TypeError("text must be a string or a callable")
    return text


def _resolve(text: TextSource) -> str:
    return text() if callable(text) else text


@dataclass
class _CommandData:
    name: str = ""
    section: str = ""
    current_section: str = ""
    texts: dict[TextId, TextSource] = field(default_factory=dict)
    visibility: Visibility = Visibility.NORMAL
    id: int = 0
    multi_command: bool = False
    require_subcommand: bool | None = None
    arguments: list[Argument] = field(default_factory=list)
    options: list[Option] = field(default_factory=list)
    commands: list[Command] = field(default_factory=list)
    value_id: int = 0
    argument_id: int = 0

    def clone(self) -> _CommandData:
        return _CommandData(
            name=self.name,
            section=self.section,
            current_section=self.current_section,
            texts=dict(self.texts),
            visibility=self.visibility,
            id=self.id,
            multi_command=self.multi_command,
            require_subcommand=self.require_subcommand,
            arguments=[a.copy() for a in self.arguments],
            options=[o.copy() for o in self.options],
            commands=[c.copy() for c in self.commands],
            value_id=self.value_id,
            argument_id=self.argument_id,
        )


class CommandView:
    """Read-only access to a command definition.

    The view refers to the definition itself, so later changes to the
    command are visible through it.
    """

    __slots__ = ("_data",)

    def __init__(self, data: _CommandData) -> None:
        self._data = data

    def help_text(self) -> str:
        """Return the text shown in the parent command's list of sub-commands."""
        text = self._data.texts.get(TextId.HELP)
        return "" if text is None else _resolve(text)

    @property
    def about(self) -> str:
        """The about text, falling back to the help text when unset."""
        text = self._data.texts.get(TextId.ABOUT)
        return self.help_text() if text is None else _resolve(text)

    @property
    def name(self) -> str:
        return self._data.name

    @property
    def section(self) -> str:
        return self._data.section

    @property
    def alias(self) -> str:
        """The name the command's values are stored under."""
        return self._data.name

    @property
    def visibility(self) -> Visibility:
        return self._data.visibility

    @property
    def id(self) -> int:
        """The custom id assigned by client code."""
        return self._data.id

    @property
    def value_id(self) -> int:
        return self._data.value_id

    @property
    def argument_id(self) -> int:
        return self._data.argument_id

    @property
    def allow_multiple_subcommands(self) -> bool:
        return self._data.multi_command

    @property
    def require_subcommand(self) -> bool:
        """True if the command requires a sub-command.

        When unassigned, this is true if the command has sub-commands but
        no arguments.
        """
        explicit = self._data.require_subcommand
        if explicit is not None:
            return explicit
        return bool(self._data.commands) and not self._data.arguments

    def arguments(self) -> list[ArgumentView]:
        """Return views of the command's arguments."""
        return [a.view() for a in self._data.arguments]

    def options(self) -> list[OptionView]:
        """Return views of the command's options."""
        return [o.view() for o in self._data.options]

    def subcommands(self) -> list[CommandView]:
        """Return views of the command's sub-commands."""
        return [c.view() for c in self._data.commands]

    def __repr__(self) -> str:
        return f"CommandView(name={self._data.name!r})"


class Command:
    """A command or sub-command with its arguments, options and sub-commands.

    A command can not have both arguments and sub-commands. Items are
    copied when added, so the originals stay usable. All setters return
    the command itself so calls can be chained.
    """

    def __init__(self, name: str = "") -> None:
        if not isinstance(name, str):
            raise TypeError("name must be a string")
        self._data = _CommandData(name=name)

    def add(self, item: Argument | Option | Command) -> Command:
        """Add a copy of an argument, option or sub-command."""
        data = self._data
        if isinstance(item, Argument):
            if not item.view().name:
                raise ArgosException("Argument must have a name.")
            if data.commands:
                raise ArgosException(
                    "Can not add arguments to a command that has sub-commands."
                )
            added = item.copy()
            if not added.view().section and data.current_section:
                added.section(data.current_section)
            data.arguments.append(added)
        elif isinstance(item, Option):
            if not item.view().flags:
                raise ArgosException("Option must have at least one flag.")
            added_option = item.copy()
            if not added_option.view().section and data.current_section:
                added_option.section(data.current_section)
            data.options.append(added_option)
        elif isinstance(item, Command):
            if not item._data.name:
                raise ArgosException("Command must have a name.")
            if data.arguments:
                raise ArgosException(
                    "Can not add sub-commands to a command that has arguments."
                )
            added_command = item.copy()
            if not added_command._data.section and data.current_section:
                added_command._data.section = data.current_section
            data.commands.append(added_command)
        else:
            raise TypeError(
                "can only add an Argument, an Option or a Command, "
                f"not {type(item).__name__}"
            )
        return self

    def name(self, name: str) -> Command:
        """Set the command's name."""
        if not isinstance(name, str):
            raise TypeError("name must be a string")
        self._data.name = name
        return self

    def help(self, text: TextSource) -> Command:
        """Set the text shown in the parent command's list of sub-commands."""
        self._data.texts[TextId.HELP] = _check_text(text)
        return self

    def about(self, text: TextSource) -> Command:
        """Set the text shown between the usage and the item lists."""
        self._data.texts[TextId.ABOUT] = _check_text(text)
        return self

    def section(self, name: str) -> Command:
        """Set the heading the command is listed under in its parent's help."""
        self._data.section = name
        return self

    def current_section(self, name: str) -> Command:
        """Set the section given to items added later that have none."""
        self._data.current_section = name
        return self

    def text(self, text_id: TextId, text: TextSource) -> Command:
        """Set a part of the help text, as a string or a callable."""
        if not isinstance(text_id, TextId):
            raise TypeError("text_id must be a TextId")
        self._data.texts[text_id] = _check_text(text)
        return self

    def visibility(self, visibility: Visibility) -> Command:
        """Restrict where the command is shown in the help text."""
        if not isinstance(visibility, Visibility):
            raise TypeError("visibility must be a Visibility")
        self._data.visibility = visibility
        return self

    def id(self, value: int) -> Command:
        """Set a custom id for client code; the parser ignores it."""
        self._data.id = int(value)
        return self

    def allow_multiple_subcommands(self, value: bool) -> Command:
        """Allow a sequence of sub-commands to be given."""
        self._data.multi_command = bool(value)
        return self

    def require_subcommand(self, value: bool) -> Command:
        """Set whether the command requires a sub-command."""
        self._data.require_subcommand = bool(value)
        return self

    def copy_from(self, command: Command) -> Command:
        """Add copies of everything in ``command``, including its texts.

        Raises ArgosException if this command already has any of the texts
        set in ``command``.
        """
        if not isinstance(command, Command):
            raise TypeError("can only copy from a Command")
        source = command._data
        for text_id in source.texts:
            if text_id in self._data.texts:
                raise ArgosException(
                    f"Command already has a text for {text_id.name}."
                )
        if source.arguments and self._data.commands:
            raise ArgosException(
                "Can not add arguments to a command that has sub-commands."
            )
        if source.commands and self._data.arguments:
            raise ArgosException(
                "Can not add sub-commands to a command that has arguments."
            )
        self._data.texts.update(source.texts)
        self._data.arguments.extend(a.copy() for a in source.arguments)
        self._data.options.extend(o.copy() for o in source.options)
        self._data.commands.extend(c.copy() for c in source.commands)
        return self

    def copy(self) -> Command:
        """Return an independent deep copy of this definition."""
        clone = Command.__new__(Command)
        clone._data = self._data.clone()
        return clone

    __copy__ = copy

    def view(self) -> CommandView:
        """Return a read-only view of this definition."""
        return CommandView(self._data)

    def __repr__(self) -> str:
        return f"Command({self._data.name!r})"