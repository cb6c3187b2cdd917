"""Exercise descriptions and the compiler calls that check them."""

from __future__ import annotations

import contextlib
import os
import subprocess
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

_COLOR_ARGS = ("--color", "always")


def temp_file() -> str:
    """Return the name of the binary this process builds exercises into."""
    return f"./temp_{os.getpid()}"


class Mode(Enum):
    """How an exercise is checked: built as a program or as a test harness."""

    COMPILE = "compile"
    TEST = "test"


@dataclass(frozen=True)
class Exercise:
    """One exercise file and the way it is checked."""

    path: Path
    mode: Mode

    def __str__(self) -> str:
        return str(self.path)

    def compile(self) -> subprocess.CompletedProcess[bytes]:
        """Build the exercise into the temporary binary."""
        args = ["rustc"]
        if self.mode is Mode.TEST:
            args.append("--test")
        args += [str(self.path), "-o", temp_file(), *_COLOR_ARGS]
        try:
            return subprocess.run(args, capture_output=True, check=False)
        except OSError as err:
            raise RuntimeError("Failed to run 'compile' command.") from err

    def run(self) -> subprocess.CompletedProcess[bytes]:
        """Execute the binary built by :meth:`compile`."""
        try:
            return subprocess.run([temp_file()], capture_output=True, check=False)
        except OSError as err:
            raise RuntimeError("Failed to run 'run' command") from err

    def clean(self) -> None:
        """Remove the temporary binary, if there is one."""
        with contextlib.suppress(OSError):
            os.remove(temp_file())


def parse_exercise_list(text: str) -> list[Exercise]:
    """Read the exercise list from the TOML text of an info file."""
    data = tomllib.loads(text)
    try:
        return [
            Exercise(Path(entry["path"]), Mode(entry["mode"]))
            for entry in data["exercises"]
        ]
    except (KeyError, TypeError) as err:
        raise ValueError(f"malformed exercise list: {err}") from err