"""Warm-up drills: variables, functions, conditionals and simple tests."""

from __future__ import annotations

_BULK_THRESHOLD = 40
_REGULAR_PRICE = 2
_BULK_PRICE = 1
_TEN = 10


def calculate_price(quantity: int) -> int:
    """Price of an apple order: 2 each, or 1 each when buying more than 40."""
    unit = _BULK_PRICE if quantity > _BULK_THRESHOLD else _REGULAR_PRICE
    return quantity * unit


def times_two(num: int) -> int:
    """Double a number."""
    return num * 2


def is_even(num: int) -> bool:
    """Whether a number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Sale price: 10 off an even price, 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """The square of a number."""
    return num * num


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    return a if a > b else b


def ring_calls(num: int) -> list[str]:
    """The lines printed when calling ``num`` times, numbered from one."""
    return [f"Ring! Call number {i}" for i in range(1, num + 1)]


def describe_ten(x: int) -> str:
    """Say whether an integer is ten; anything but an integer is a type error."""
    if isinstance(x, bool) or not isinstance(x, int):
        raise TypeError(f"expected an integer, got {type(x).__name__}")
    if x == _TEN:
        return "Ten!"
    return "Not ten!"