import pytest

from argoscli.argument import Argument
from argoscli.command import Command
from argoscli.enums import TextId, Visibility
from argoscli.errors import ArgosException
from argoscli.option import Option


def test_name_from_constructor_and_setter():
    cmd = Command("commit")
    assert cmd.view().name == "commit"
    cmd.name("push")
    assert cmd.view().name == "push"
    assert cmd.view().alias == "push"


def test_help_and_about():
    cmd = Command("run").help("Run it.")
    assert cmd.view().help_text() == "Run it."
    assert cmd.view().about == "Run it."
    cmd.about("Longer description.")
    assert cmd.view().about == "Longer description."
    assert cmd.view().help_text() == "Run it."


def test_help_callback():
    cmd = Command("x").help(lambda: "generated")
    assert cmd.view().help_text() == "generated"


def test_text_sets_help():
    cmd = Command("x").text(TextId.HELP, "via text")
    assert cmd.view().help_text() == "via text"


def test_text_rejects_bad_id():
    with pytest.raises(TypeError):
        Command("x").text("HELP", "text")


def test_setters_visible_through_view():
    cmd = (
        Command("x")
        .section("TOOLS")
        .visibility(Visibility.HIDDEN)
        .id(7)
        .allow_multiple_subcommands(True)
    )
    view = cmd.view()
    assert view.section == "TOOLS"
    assert view.visibility is Visibility.HIDDEN
    assert view.id == 7
    assert view.allow_multiple_subcommands is True


def test_add_argument_and_option():
    cmd = Command("x").add(Argument("FILE")).add(Option("-v", "--verbose"))
    assert [a.name for a in cmd.view().arguments()] == ["FILE"]
    assert [o.flags for o in cmd.view().options()] == [["-v", "--verbose"]]


def test_add_copies_item():
    arg = Argument("FILE")
    cmd = Command("x").add(arg)
    arg.name("OTHER")
    assert cmd.view().arguments()[0].name == "FILE"


def test_add_unnamed_argument_raises():
    with pytest.raises(ArgosException):
        Command("x").add(Argument())


def test_add_option_without_flags_raises():
    with pytest.raises(ArgosException):
        Command("x").add(Option())


def test_add_unnamed_command_raises():
    with pytest.raises(ArgosException):
        Command("x").add(Command())


def test_arguments_and_subcommands_are_exclusive():
    with pytest.raises(ArgosException):
        Command("x").add(Argument("A")).add(Command("sub"))
    with pytest.raises(ArgosException):
        Command("x").add(Command("sub")).add(Argument("A"))


def test_add_wrong_type_raises():
    with pytest.raises(TypeError):
        Command("x").add("oops")


def test_current_section_applies_to_later_items():
    cmd = (
        Command("x")
        .add(Option("--a"))
        .current_section("EXTRA")
        .add(Option("--b"))
        .add(Option("--c").section("OWN"))
    )
    sections = [o.section for o in cmd.view().options()]
    assert sections == ["", "EXTRA", "OWN"]


def test_current_section_applies_to_subcommands():
    cmd = Command("x").current_section("GROUP").add(Command("sub"))
    assert cmd.view().subcommands()[0].section == "GROUP"


def test_require_subcommand_default_and_explicit():
    assert Command("x").view().require_subcommand is False
    with_sub = Command("x").add(Command("sub"))
    assert with_sub.view().require_subcommand is True
    with_sub.require_subcommand(False)
    assert with_sub.view().require_subcommand is False


def test_nested_subcommands():
    inner = Command("inner").add(Argument("N"))
    outer = Command("outer").add(inner)
    root = Command("root").add(outer)
    sub = root.view().subcommands()[0]
    assert sub.name == "outer"
    assert sub.subcommands()[0].arguments()[0].name == "N"


def test_copy_is_independent():
    cmd = Command("x").add(Option("--a")).help("h")
    clone = cmd.copy()
    clone.add(Option("--b")).name("y")
    assert len(cmd.view().options()) == 1
    assert len(clone.view().options()) == 2
    assert cmd.view().name == "x"
    assert clone.view().help_text() == "h"


def test_copy_from_copies_items_and_texts():
    common = Command().add(Option("--verbose")).help("shared")
    cmd = Command("x").add(Option("--quiet")).copy_from(common)
    assert [o.flags for o in cmd.view().options()] == [["--quiet"], ["--verbose"]]
    assert cmd.view().help_text() == "shared"


def test_copy_from_conflicting_text_raises():
    common = Command().help("one")
    cmd = Command("x").help("two")
    with pytest.raises(ArgosException):
        cmd.copy_from(common)
    assert cmd.view().help_text() == "two"


def test_copy_from_respects_exclusivity():
    with pytest.raises(ArgosException):
        Command("x").add(Command("sub")).copy_from(Command().add(Argument("A")))


def test_view_reflects_later_changes():
    cmd = Command("x")
    view = cmd.view()
    cmd.add(Argument("A"))
    assert [a.name for a in view.arguments()] == ["A"]