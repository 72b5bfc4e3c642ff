from typing import Literal

import pytest

from argtree import MISSING, ArgumentKind, Program
from argtree.exceptions import (
    BuildError,
    DuplicateAliasError,
    DuplicateNameError,
    InvalidDefaultError,
    InvalidHandlerError,
    InvalidNameError,
    TreeFrozenError,
)


def noop(bag):
    return 0


def test_nested_groups_and_paths():
    program = Program("app")
    outer = program.add_command_group("outer", "Outer group")
    inner = outer.add_command_group("inner")
    command = inner.add_command("leaf", "A leaf", noop)

    assert command.path == ("outer", "inner", "leaf")
    assert program.find("outer", "inner", "leaf") is command
    assert program.find("outer", "missing") is None
    assert program.find("outer", "inner", "leaf", "deeper") is None
    assert [child.name for child in outer.children] == ["inner"]
    assert inner.parent == outer.index
    assert program.tree.node(command.index) is command


def test_children_keep_declaration_order():
    program = Program("app")
    for name in ("zeta", "alpha", "mid"):
        program.add_command(name, "", noop)
    assert [child.name for child in program.root.children] == ["zeta", "alpha", "mid"]


def test_duplicate_sibling_names():
    program = Program("app")
    group = program.add_command_group("trading")
    group.add_command("sell", "", noop)
    with pytest.raises(DuplicateNameError):
        group.add_command("sell", "", noop)
    with pytest.raises(DuplicateNameError):
        group.add_command_group("sell")
    with pytest.raises(DuplicateNameError):
        program.add_command("trading", "", noop)


def test_same_name_under_different_parents_is_allowed():
    program = Program("app")
    program.add_command_group("a").add_command("run", "", noop)
    program.add_command_group("b").add_command("run", "", noop)
    assert program.find("a", "run") is not program.find("b", "run")


@pytest.mark.parametrize("name", ["", "-x", "--long", "two words", None])
def test_invalid_names(name):
    program = Program("app")
    with pytest.raises(InvalidNameError):
        program.add_command(name, "", noop)
    with pytest.raises(InvalidNameError):
        program.add_command_group(name)


def test_handler_must_be_callable():
    program = Program("app")
    with pytest.raises(InvalidHandlerError):
        program.add_command("run", "", None)
    with pytest.raises(InvalidHandlerError):
        program.add_command("run", "", "not callable")


def test_positional_declaration_order():
    program = Program("app")
    command = program.add_command("run", "", noop)
    command.add_positional_argument("first").add_positional_argument("second", type=int)

    first, second = command.positionals
    assert (first.name, first.position, first.type) == ("first", 0, str)
    assert (second.name, second.position, second.type) == ("second", 1, int)
    assert first.kind == ArgumentKind.POSITIONAL


def test_flag_kinds_and_defaults():
    program = Program("app")
    command = program.add_command("run", "", noop)
    command.add_flag("verbose", "Talk more", short="v")
    command.add_flag("count", type=int)
    command.add_flag("limit", type=int, default=10)

    verbose = command.get_argument("verbose")
    assert verbose.kind == ArgumentKind.STORE_TRUE
    assert verbose.default is False
    assert verbose.flags == ("--verbose", "-v")

    count = command.get_argument("count")
    assert count.kind == ArgumentKind.STORE
    assert count.default is MISSING
    assert not count.has_default

    assert command.get_argument("limit").default == 10
    assert command.match_flag("-v") is verbose
    assert command.match_flag("--limit").name == "limit"
    assert command.match_flag("-x") is None


def test_duplicate_argument_names():
    program = Program("app")
    command = program.add_command("run", "", noop)
    command.add_positional_argument("target")
    command.add_flag("verbose")
    with pytest.raises(DuplicateNameError):
        command.add_flag("verbose", type=int)
    with pytest.raises(DuplicateNameError):
        command.add_flag("target")
    with pytest.raises(DuplicateNameError):
        command.add_positional_argument("verbose")


def test_duplicate_short_alias():
    program = Program("app")
    command = program.add_command("run", "", noop)
    command.add_flag("verbose", short="v")
    with pytest.raises(DuplicateAliasError):
        command.add_flag("version", short="v")


@pytest.mark.parametrize("short", ["", "ab", "-", " "])
def test_invalid_short_alias(short):
    program = Program("app")
    command = program.add_command("run", "", noop)
    with pytest.raises(InvalidNameError):
        command.add_flag("verbose", short=short)


def test_help_aliases_are_reserved():
    program = Program("app")
    command = program.add_command("run", "", noop)
    with pytest.raises(DuplicateAliasError):
        command.add_flag("help")
    with pytest.raises(DuplicateAliasError):
        command.add_flag("host", short="h", type=str)


def test_help_aliases_free_when_help_disabled():
    program = Program("app", help_enabled=False)
    command = program.add_command("run", "", noop)
    command.add_flag("host", short="h", type=str)
    assert command.match_flag("-h").name == "host"


def test_switch_cannot_declare_default():
    program = Program("app")
    command = program.add_command("run", "", noop)
    with pytest.raises(BuildError):
        command.add_flag("verbose", default=True)


def test_tree_is_frozen_after_parse():
    program = Program("app")
    command = program.add_command("run", "", noop)
    program.parse(["run"])
    with pytest.raises(TreeFrozenError):
        program.add_command("other", "", noop)
    with pytest.raises(TreeFrozenError):
        command.add_flag("late")
    with pytest.raises(TreeFrozenError):
        program.register_type("late", str)


def test_to_dict_serializes_tree():
    program = Program("app")
    group = program.add_command_group("g", "Group")
    command = group.add_command("c", "Command", noop)
    command.add_positional_argument("x", "An x", type=int)
    command.add_flag("y", short="y", type=float, default=1.5)

    assert program.tree.to_dict() == {
        "type": "group",
        "name": "",
        "description": "",
        "children": [
            {
                "type": "group",
                "name": "g",
                "description": "Group",
                "children": [
                    {
                        "type": "command",
                        "name": "c",
                        "description": "Command",
                        "positionals": [
                            {
                                "name": "x",
                                "kind": "positional",
                                "type": "int",
                                "help": "An x",
                                "position": 0,
                            }
                        ],
                        "flags": [
                            {
                                "name": "y",
                                "kind": "store",
                                "type": "float",
                                "help": "",
                                "short": "y",
                                "default": 1.5,
                            }
                        ],
                    }
                ],
            }
        ],
    }


def test_usage_line(program):
    sell = program.find("trading", "sell")
    assert sell.get_usage("shop") == (
        "shop trading sell <name> <price> [-d DISCOUNT] [-n NOTE] [-r]"
    )


def test_int_default_of_float_flag_is_widened():
    program = Program("app")
    command = program.add_command("sell", "", noop)
    command.add_flag("discount", type="double", default=0)
    assert command.get_argument("discount").default == 0.0
    assert isinstance(command.get_argument("discount").default, float)

    omitted = program.parse(["sell"]).bag
    supplied = program.parse(["sell", "--discount", "0.5"]).bag
    assert omitted.get("discount", float) == 0.0
    assert supplied.get("discount", float) == 0.5


@pytest.mark.parametrize(
    "type_tag, default",
    [
        ("double", "0.5"),
        (int, 1.5),
        ("integer", True),
        (str, 3),
        ("bool", "yes"),
        (Literal["a", "b"], "c"),
    ],
)
def test_default_must_match_flag_type(type_tag, default):
    command = Program("app").add_command("go", "", noop)
    with pytest.raises(InvalidDefaultError):
        command.add_flag("value", type=type_tag, default=default)
    assert command.get_argument("value") is None


def test_default_of_custom_type_is_not_checked():
    program = Program("app")
    command = program.add_command("go", "", noop)
    command.add_flag("items", type="csv", default=())
    program.register_type("csv", lambda raw: tuple(raw.split(",")))
    assert program.parse(["go"]).bag.get("items") == ()
