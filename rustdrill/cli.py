"""Command line: verify, watch or run the exercises listed in info.toml."""

from __future__ import annotations

import argparse
import os
import queue
import sys
from collections.abc import Sequence
from itertools import dropwhile
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise, parse_exercise_list
from .run import run
from .verify import ExerciseFailed, verify

_BANNER = """
       welcome to...

   r u s t d r i l l
"""

_QUIET_PERIOD = 2.0
_SEPARATOR = "----------**********----------\n"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rustdrill",
        description=(
            "A collection of small exercises to get you used to "
            "writing and reading Rust code"
        ),
    )
    parser.set_defaults(action=None)
    commands = parser.add_subparsers(dest="command")
    commands.add_parser(
        "verify",
        aliases=["v"],
        help="Verifies all exercises according to the recommended order",
    ).set_defaults(action="verify")
    commands.add_parser(
        "watch", aliases=["w"], help="Reruns `verify` when files were edited"
    ).set_defaults(action="watch")
    run_parser = commands.add_parser(
        "run", aliases=["r"], help="Runs/Tests a single exercise"
    )
    run_parser.add_argument("file", nargs="?")
    run_parser.add_argument(
        "-t", "--test", action="store_true", help="Run the file as a test"
    )
    run_parser.set_defaults(action="run")
    return parser


def _ends_with(path: Path, tail: Path) -> bool:
    count = len(tail.parts)
    return path.parts[len(path.parts) - count :] == tail.parts


def _matches(candidate: Path, exercise_path: Path) -> bool:
    try:
        resolved = candidate.resolve(strict=True)
    except OSError:
        return False
    return _ends_with(resolved, exercise_path)


def _from_changed(path: Path, exercises: Sequence[Exercise]) -> list[Exercise]:
    """Exercises from the one at ``path`` to the end of the list."""
    return list(dropwhile(lambda e: not _ends_with(path, e.path), exercises))


def _try_verify(exercises: Sequence[Exercise]) -> None:
    try:
        verify(exercises)
    except ExerciseFailed:
        pass


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, changes: queue.Queue[Path]) -> None:
        super().__init__()
        self._changes = changes

    def on_created(self, event: FileSystemEvent) -> None:
        self._push(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._push(event)

    def _push(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._changes.put(Path(os.fsdecode(event.src_path)))


def _debounced(changes: queue.Queue[Path]) -> list[Path]:
    """Wait for changes, then gather them until none arrive for a while."""
    pending = {changes.get(): None}
    while True:
        try:
            pending[changes.get(timeout=_QUIET_PERIOD)] = None
        except queue.Empty:
            return list(pending)


def watch(exercises: Sequence[Exercise]) -> None:
    """Verify, then verify again from each edited exercise onwards, forever."""
    changes: queue.Queue[Path] = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeHandler(changes), "./exercises", recursive=True)
    observer.start()
    try:
        _try_verify(exercises)
        while True:
            for path in _debounced(changes):
                if path.suffix == ".rs" and path.exists():
                    print(_SEPARATOR)
                    _try_verify(_from_changed(path.resolve(), exercises))
    finally:
        observer.stop()
        observer.join()


def _run_file(file: str | None, exercises: Sequence[Exercise]) -> int:
    if file is None:
        print("Please supply a file name!")
        return 1
    target = Path(file)
    exercise = next((e for e in exercises if _matches(target, e.path)), None)
    if exercise is None:
        print("No exercise found for your file name!")
        return 1
    try:
        run(exercise)
    except ExerciseFailed:
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; returns the process exit code."""
    args = _build_parser().parse_args(argv)

    if args.action is None:
        print(_BANNER)

    info = Path("info.toml")
    if not info.exists():
        print(f"{sys.argv[0]} must be run from the rustdrill directory")
        print("Try `cd rustdrill/`!")
        return 1

    exercises = parse_exercise_list(info.read_text(encoding="utf-8"))

    if args.action == "run":
        return _run_file(args.file, exercises)
    if args.action == "verify":
        try:
            verify(exercises)
        except ExerciseFailed:
            return 1
        return 0
    if args.action == "watch":
        try:
            watch(exercises)
        except KeyboardInterrupt:
            pass
        return 0

    print(Path("default_out.txt").read_text(encoding="utf-8"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())