"""Drills on primitive values, strings, modules and macros."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

_COLOR_WORDS = frozenset({"green", "blue", "red"})

FRUIT = "Pear"
VEGGIE = "Cucumber"


def greeting(is_morning: bool, is_evening: bool) -> list[str]:
    """The greetings that apply at this time of day."""
    lines = []
    if is_morning:
        lines.append("Good morning!")
    if is_evening:
        lines.append("Good evening!")
    return lines


def classify_char(ch: str) -> str:
    """Say whether a single character is alphabetic, numeric or neither."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if ch.isalpha():
        return "Alphabetical!"
    if ch.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def describe_array(items: Sequence[Any]) -> str:
    """Comment on the size of a sequence."""
    if len(items) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(items: Sequence[Any]) -> Sequence[Any]:
    """The second to the fourth items."""
    return items[1:4]


def describe_cat(cat: tuple[str, float]) -> str:
    """Describe a ``(name, age)`` pair."""
    name, age = cat
    return f"{name} is {age} years old."


def second_number(numbers: Sequence[Any]) -> Any:
    """The second element of a sequence."""
    return numbers[1]


def current_favorite_color() -> str:
    """The current favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is one of the known colour words."""
    return attempt in _COLOR_WORDS


def make_sausage() -> str:
    """What the sausage factory produces."""
    return "sausage!"


def favorite_snacks() -> str:
    """The favourite fruit and vegetable, as one sentence."""
    return f"favorite snacks: {FRUIT} and {VEGGIE}"


def my_macro(*args: Any) -> str:
    """A message with no argument, or one that shows the single argument."""
    match args:
        case ():
            return "Check out my macro!"
        case (value,):
            return f"Look at this other macro: {value}"
        case _:
            raise TypeError(f"my_macro takes 0 or 1 arguments, got {len(args)}")


def hello(name: str) -> str:
    """Greet someone by name."""
    return f"Hello {name}"


def string_transforms() -> list[str]:
    """A series of strings, each built by a different string operation."""
    return [
        "blue",
        str("red"),
        "".join(["hi"]),
        "rust is fun!"[:],
        format("nice weather"),
        "Interpolation {}".format("Station"),
        "abc"[0:1],
        "  hello there ".strip(),
        "Happy Monday!".replace("Mon", "Tues"),
        "mY sHiFt KeY iS sTiCkY".lower(),
    ]