"""Running or testing a single exercise."""

from __future__ import annotations

from .exercise import Exercise, Mode
from .verify import ExerciseFailed, _show, _spinner, _success, _warning, test


def run(exercise: Exercise) -> None:
    """Run or test one exercise; raise ExerciseFailed if it does not pass."""
    if exercise.mode is Mode.TEST:
        test(exercise)
    else:
        compile_and_run(exercise)


def compile_and_run(exercise: Exercise) -> None:
    """Compile an exercise, run it and show what it printed."""
    try:
        with _spinner(f"Compiling {exercise}...") as update:
            compiled = exercise.compile()
            update(f"Running {exercise}...")
            ran = exercise.run() if compiled.returncode == 0 else None
        if ran is None:
            _warning(f"Compilation of {exercise} failed! Compiler error message:\n")
            _show(compiled.stderr)
            raise ExerciseFailed(exercise)
        _show(ran.stdout)
        if ran.returncode != 0:
            _show(ran.stderr)
            _warning(f"Ran {exercise} with errors")
            raise ExerciseFailed(exercise)
        _success(f"Successfully ran {exercise}")
    finally:
        exercise.clean()