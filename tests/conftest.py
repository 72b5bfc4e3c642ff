from enum import Enum

import pytest
from rich.console import Console

from argtree import Program


class Location(Enum):
    LHC = "lhc"
    CERN = "cern"
    FERMILAB = "fermilab"


class Recorder:
    """Handler that remembers every bag it was called with."""

    def __init__(self, status=0):
        self.status = status
        self.calls = []

    def __call__(self, bag):
        self.calls.append(bag)
        return self.status

    @property
    def called(self):
        return bool(self.calls)

    @property
    def bag(self):
        return self.calls[-1]


@pytest.fixture
def sell_handler():
    return Recorder()


@pytest.fixture
def view_handler():
    return Recorder()


@pytest.fixture
def program(sell_handler, view_handler):
    program = Program(
        "shop", "Example shop", width=80, console=Console(color_system=None)
    )
    program.register_type("location", Location)

    trading = program.add_command_group("trading", "Buy and sell")
    sell = trading.add_command("sell", "Sell an item", sell_handler)
    sell.add_positional_argument("name", "Buyer name")
    sell.add_positional_argument("price", "Asking price", type="double")
    sell.add_flag("discount", "Discount to apply", short="d", type=float, default=0.0)
    sell.add_flag("note", "Free-form note", short="n", type=str)
    sell.add_flag("receipt", "Print a receipt", short="r")

    view = program.add_command("view", "View a person", view_handler)
    view.add_positional_argument("person", "Who to view")
    view.add_flag("label", "Label to show", type=str)
    view.add_flag("location", "Where to look", short="l", type="location")
    view.add_flag("smirk", "Add a smirk")
    return program
