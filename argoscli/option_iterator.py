"""Low-level tokenizer that splits command line arguments into options and values."""

from __future__ import annotations

from collections.abc import Iterable

from .errors import ArgosException


class OptionIterator:
    """Walks a list of command line arguments, splitting ``flag=value`` tokens.

    :meth:`next` returns the next flag or argument; a token that starts with
    the prefix, is longer than two characters and contains ``=`` is returned
    up to and including the ``=``. :meth:`next_value` then returns the part
    after ``=``, or consumes the following argument as the value.
    """

    def __init__(self, args: Iterable[str] = (), prefix: str = "-") -> None:
        self._args: list[str] = list(args)
        self._index = 0
        # 0: at the start of the current argument; None: current argument
        # fully consumed; otherwise offset of an unread value in it.
        self._pos: int | None = 0
        self._prefix = prefix

    def _at_end(self) -> bool:
        return self._index >= len(self._args)

    def next(self) -> str | None:
        """Return the next flag or argument, or None when there are no more."""
        if self._pos != 0:
            self._pos = 0
            self._index += 1

        if self._at_end():
            return None

        arg = self._args[self._index]
        if len(arg) <= 2 or not arg.startswith(self._prefix):
            self._pos = None
            return arg

        eq = arg.find("=")
        if eq == -1:
            self._pos = None
            return arg

        self._pos = eq + 1
        return arg[: self._pos]

    def next_value(self) -> str | None:
        """Return the value belonging to the last flag, or None if there is none."""
        if self._at_end():
            return None

        if self._pos is not None:
            result = self._args[self._index][self._pos:]
            self._pos = None
            return result

        self._index += 1
        if self._at_end():
            self._pos = 0
            return None

        arg = self._args[self._index]
        self._pos = len(arg)
        return arg

    def current(self) -> str:
        """Return the argument currently being processed."""
        if self._at_end():
            raise ArgosException("There is no current argument.")
        return self._args[self._index]

    def remaining_arguments(self) -> list[str]:
        """Return the arguments that have not been processed yet."""
        start = self._index if self._pos == 0 else self._index + 1
        return self._args[start:]

    def copy(self) -> OptionIterator:
        """Return an independent iterator in the same state."""
        clone = OptionIterator(self._args, self._prefix)
        clone._index = self._index
        clone._pos = self._pos
        return clone

    __copy__ = copy