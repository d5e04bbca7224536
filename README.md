# argoscli

Building blocks for describing a program's command line declaratively:
arguments, options and (sub-)commands, each configured with chained
method calls, plus a small tokenizer that splits raw command line words
into option flags and values. The package has no dependencies outside
the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Defining arguments, options and commands

Every setter returns the object itself, so a definition reads as one chain.

```python
from argoscli.argument import Argument
from argoscli.option import Option
from argoscli.command import Command
from argoscli.enums import OptionOperation, OptionType, TextId

files = Argument("FILE").help("A file to process.").count(1, 10)

verbose = Option("-v", "--verbose").help("Print more details.")

include = (
    Option()
    .flag("--include=")
    .argument("DIR")
    .operation(OptionOperation.APPEND)
    .help("Add DIR to the list of include directories.")
)

version = Option("--version").type(OptionType.EXIT)

build = (
    Command("build")
    .help("Build the project.")
    .text(TextId.FINAL_TEXT, lambda: "See the manual for more.")
    .add(files)
    .add(verbose)
    .add(include)
)

tool = Command("tool").add(build).add(version)
```

Some details worth knowing:

- `Argument.count(n)` sets both minimum and maximum; `count(min, max)`
  sets them separately. Negative counts, a maximum of zero, or a maximum
  below the minimum raise `argoscli.errors.ArgosException`.
  `optional()` sets the minimum count to 0; `mandatory()` raises it to 1
  if it was 0.
- `Option.constant` accepts a string, an int or a bool and stores it as
  a string; `True` and `False` become `"1"` and `"0"`.
- Help texts and command texts may be strings or callables returning a
  string.
- `Command.add` stores a *copy* of the argument, option or command, so the
  original stays usable. Items added without a section get the command's
  `current_section`, if one is set.
- A command holds either arguments or sub-commands, never both. Adding the
  wrong kind, adding an argument without a name, an option without flags
  or a command without a name raises `ArgosException`.
- `Command.copy_from` adds copies of another command's arguments,
  options, sub-commands and texts; it raises `ArgosException` if this
  command already has one of those texts.
- `copy()` on `Argument`, `Option` and `Command` returns an independent
  copy (`copy.copy` does the same).

## Views

`view()` returns a read-only view of a definition. The view refers to the
definition itself, so later changes to the definition show through it.

```python
view = build.view()
print([arg.name for arg in view.arguments()])
print([opt.flags for opt in view.options()])
print(view.help_text())           # "Build the project."
print(view.about)                 # falls back to the help text
print(tool.view().require_subcommand)  # True: sub-commands, no arguments
```

`help_text()` always returns the resolved string, calling a text callback
when one was given. `CommandView.require_subcommand` returns the explicit
setting when one was made, otherwise true exactly when the command has
sub-commands but no arguments.

## Tokenizing a command line

`OptionIterator` walks over raw command line words. A word that starts
with the prefix, is longer than two characters and contains `=` is
returned up to and including the `=`; `next_value()` then returns the
rest, or otherwise consumes the following word.

```python
from argoscli.option_iterator import OptionIterator

it = OptionIterator(["--file=a.txt", "-v", "b.txt"], "-")
it.next()                 # "--file="
it.next_value()           # "a.txt"
it.next()                 # "-v"
it.remaining_arguments()  # ["b.txt"]
```

`next()` and `next_value()` return `None` when the words run out;
`current()` raises `ArgosException` when there is no current word.

## Enumerations

`argoscli.enums` provides `OptionStyle`, `OptionOperation`, `OptionType`,
`ParserResultCode`, `TextId` and `Visibility`. `Visibility` values can be
intersected with `&` (`Visibility.NORMAL & Visibility.USAGE` is
`Visibility.USAGE`). `to_string(TextId.USAGE)` returns `"USAGE"`.

## What this package does not do

It only describes a command line. There is no parser here: nothing
matches words from `sys.argv` against these definitions, collects or
converts values, runs callbacks, writes help text or error messages, or
exits the program. The enumerations for option styles, option types and
result codes are provided for such a parser to use.