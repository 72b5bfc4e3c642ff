"""handlers.py"""

from argtree.console import console


def sell(bag) -> int:
    console.print(f"Sold to {bag.get('name')} for {bag.get('price', float):.2f}")
    return 0


def ping(bag) -> int:
    console.print("pong")
    return 0
