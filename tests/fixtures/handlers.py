"""Handlers referenced by the config fixtures."""

CALLS = []


def sell(bag):
    CALLS.append(("sell", bag.as_dict()))
    return 0


def status(bag):
    CALLS.append(("status", bag.as_dict()))
    return 3


def to_upper(raw):
    if not raw.isalpha():
        raise ValueError("letters only")
    return raw.upper()
