"""Checking exercises in order, stopping at the first that does not pass."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager

from rich.console import Console

from .exercise import Exercise, Mode

_console = Console(highlight=False, markup=False, emoji=False, soft_wrap=True)


class ExerciseFailed(Exception):
    """An exercise did not compile, or its program or tests failed."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} did not pass")
        self.exercise = exercise


def _mark(symbol: str, fallback: str) -> str:
    try:
        symbol.encode(_console.encoding)
    except (UnicodeEncodeError, LookupError):
        return fallback
    return symbol


def _success(text: str) -> None:
    _console.print(f"{_mark('✅', '✓')} {text}", style="green")


def _warning(text: str) -> None:
    _console.print(f"{_mark('⚠️ ', '!')} {text}", style="red")


def _show(data: bytes) -> None:
    _console.print(data.decode("utf-8", errors="replace"))


@contextmanager
def _spinner(message: str) -> Iterator[Callable[[str], None]]:
    """Show a spinner on a terminal; yield a function that changes its text."""
    if not _console.is_terminal:
        yield lambda text: None
        return
    with _console.status(message) as status:
        yield lambda text: status.update(text)


def verify(exercises: Iterable[Exercise]) -> None:
    """Check each exercise in turn; raise ExerciseFailed at the first failure."""
    for exercise in exercises:
        if exercise.mode is Mode.TEST:
            test(exercise)
        else:
            compile_only(exercise)


def compile_only(exercise: Exercise) -> None:
    """Check that an exercise compiles."""
    try:
        with _spinner(f"Compiling {exercise}..."):
            output = exercise.compile()
        if output.returncode != 0:
            _warning(f"Compilation of {exercise} failed! Compiler error message:\n")
            _show(output.stderr)
            raise ExerciseFailed(exercise)
        _success(f"Successfully compiled {exercise}!")
    finally:
        exercise.clean()


def test(exercise: Exercise) -> None:
    """Check that an exercise compiles as a test harness and its tests pass."""
    try:
        with _spinner(f"Testing {exercise}...") as update:
            compiled = exercise.compile()
            ran = None
            if compiled.returncode == 0:
                update(f"Running {exercise}...")
                ran = exercise.run()
        if ran is None:
            _warning(
                f"Compiling of {exercise} failed! Please try again. Here's the output:"
            )
            _show(compiled.stderr)
            raise ExerciseFailed(exercise)
        if ran.returncode != 0:
            _warning(
                f"Testing of {exercise} failed! Please try again. Here's the output:"
            )
            _show(ran.stdout)
            raise ExerciseFailed(exercise)
        _success(f"Successfully tested {exercise}!")
    finally:
        exercise.clean()