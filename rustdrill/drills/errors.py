"""Drills on reporting failure: optional values, errors and their propagation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import IO, AnyStr

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of ``bits`` width, strictly: sign and ASCII digits only."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > (1 << (bits - 1)) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(1 << (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


class CreationError(ValueError):
    """A value that cannot make a positive, nonzero integer."""

    NEGATIVE = "Negative"
    ZERO = "Zero"

    def __init__(self, kind: str) -> None:
        if kind not in (self.NEGATIVE, self.ZERO):
            raise ValueError(f"unknown creation error kind: {kind!r}")
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return self.kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value == 0:
            raise CreationError(CreationError.ZERO)
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name is refused with an explanation."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed to buy the typed quantity of items, fee included."""
    qty = _parse_int(item_quantity, 32)
    cost = qty * _COST_PER_ITEM + _PROCESSING_FEE
    if not -(1 << 31) <= cost <= (1 << 31) - 1:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def spend_tokens(tokens: int, item_quantity: str) -> tuple[int, str]:
    """Buy the typed quantity if affordable; return tokens left and a message."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return tokens, "You can't afford that many!"
    remaining = tokens - cost
    return remaining, f"You now have {remaining} tokens."


def read_and_validate(stream: IO[AnyStr]) -> PositiveNonzeroInteger:
    """Read one line and turn it into a positive, nonzero integer.

    Errors from reading, parsing or validation propagate unchanged.
    """
    line = stream.readline()
    if isinstance(line, bytes):
        line = line.decode("utf-8")
    return PositiveNonzeroInteger(_parse_int(line.strip(), 64))


def pop_too_much() -> bool:
    """Pop twice from a one-item list, printing only the values that exist."""
    items = [3]
    if items:
        print(f"The last item in the list is {items.pop()!r}")
    if items:
        print(f"The second-to-last item in the list is {items.pop()!r}")
    return True