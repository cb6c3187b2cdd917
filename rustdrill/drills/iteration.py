"""Drills on iterators, structs and handing collections between functions."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import NamedTuple

_U64_MAX = (1 << 64) - 1


def capitalize_first(word: str) -> str:
    """The word with its first character in upper case."""
    if not word:
        return ""
    return word[0].upper() + word[1:]


def capitalize_words(words: Iterable[str]) -> list[str]:
    """Capitalize each word, keeping them separate."""
    return [capitalize_first(word) for word in words]


def capitalize_joined(words: Iterable[str]) -> str:
    """Capitalize each word and join them into one string."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division that cannot give a whole result."""


class NotDivisibleError(DivisionError):
    """The dividend is not an exact multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((NotDivisibleError, self.dividend, self.divisor))

    def __repr__(self) -> str:
        return f"NotDivisibleError(dividend={self.dividend}, divisor={self.divisor})"


class DivideByZeroError(DivisionError, ZeroDivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivisionError):
            return NotImplemented
        return isinstance(other, DivideByZeroError)

    def __hash__(self) -> int:
        return hash(DivideByZeroError)

    def __repr__(self) -> str:
        return "DivideByZeroError()"


def divide(a: int, b: int) -> int:
    """``a`` divided by ``b``, when ``b`` divides ``a`` exactly."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def divide_all(numbers: Iterable[int], divisor: int) -> list[int]:
    """Divide every number; the first failing division raises its error."""
    return [divide(n, divisor) for n in numbers]


def divide_each(numbers: Iterable[int], divisor: int) -> list[int | DivisionError]:
    """Divide every number, keeping each result or the error it produced."""
    results: list[int | DivisionError] = []
    for n in numbers:
        try:
            results.append(divide(n, divisor))
        except DivisionError as err:
            results.append(err)
    return results


def factorial(num: int) -> int:
    """``num!`` as an unsigned 64-bit value."""
    if num < 0:
        raise ValueError(f"factorial of a negative number: {num}")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError(f"{num}! does not fit in an unsigned 64-bit integer")
    return result


@dataclass
class ColorClassicStruct:
    """A colour with named fields."""

    name: str
    hex: str


class ColorTupleStruct(NamedTuple):
    """A colour as a positional pair."""

    name: str
    hex: str


@dataclass(frozen=True, repr=False)
class UnitStruct:
    """A value with no fields."""

    def __repr__(self) -> str:
        return "UnitStruct"


def fill_vec(vec: Iterable[int] | None = None) -> list[int]:
    """A new list holding the given items followed by 22, 44 and 66.

    The argument is left untouched; with no argument a fresh list is built.
    """
    filled = list(vec) if vec is not None else []
    filled.extend((22, 44, 66))
    return filled