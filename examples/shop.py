"""shop.py"""

from datetime import datetime
from enum import Enum

from argtree import Program
from argtree.console import console
from argtree.utils import setup_logging

setup_logging()


class Location(Enum):
    LHC = "lhc"
    CERN = "cern"
    FERMILAB = "fermilab"


def sell(bag) -> int:
    price = bag.get("price", float) * (1 - bag.get("discount", float))
    console.print(f"Selling to {bag.get('name')} for {price:.2f}")
    if bag.flag("receipt"):
        console.print(f"Receipt issued {bag.get('when', datetime):%Y-%m-%d}")
    return 0


def view(bag) -> int:
    face = " :)" if bag.flag("smirk") else ""
    where = f" at {bag.get('location').value}" if "location" in bag else ""
    console.print(f"{bag.get('person')}{where}{face}")
    return 0


program = Program("shop", "Example shop", width=80)
program.register_type("location", Location)

trading = program.add_command_group("trading", "Buy and sell")
(
    trading.add_command("sell", "Sell an item", sell)
    .add_positional_argument("name", "Buyer name")
    .add_positional_argument("price", "Asking price", type="double")
    .add_flag("discount", "Discount to apply", short="d", type=float, default=0.0)
    .add_flag("when", "Sale date", type=datetime, default=datetime.now())
    .add_flag("receipt", "Print a receipt", short="r")
)

(
    program.add_command("view", "View a person", view)
    .add_positional_argument("person", "Who to view")
    .add_flag("location", "Where to look", short="l", type="location")
    .add_flag("smirk", "Add a smirk")
)

if __name__ == "__main__":
    program.main()
