import subprocess
from pathlib import Path

import pytest

from rustdrill.cli import _from_changed, main
from rustdrill.exercise import Exercise, Mode

SUCCESS_INFO = (
    '[[exercises]]\npath = "compSuccess.rs"\nmode = "compile"\n\n'
    '[[exercises]]\npath = "testSuccess.rs"\nmode = "test"\n'
)

FAILURE_INFO = (
    '[[exercises]]\npath = "compFailure.rs"\nmode = "compile"\n\n'
    '[[exercises]]\npath = "testFailure.rs"\nmode = "test"\n\n'
    '[[exercises]]\npath = "testNotPassed.rs"\nmode = "test"\n'
)


class FakeToolchain:
    def __init__(self):
        self.broken = {"compFailure.rs", "testFailure.rs"}
        self.failing = {"testNotPassed.rs"}
        self.compiled = []
        self.current = None

    def __call__(self, args, **kwargs):
        if args[0] == "rustc":
            name = Path(next(a for a in args if a.endswith(".rs"))).name
            self.compiled.append(name)
            self.current = name
            code = 1 if name in self.broken else 0
            return subprocess.CompletedProcess(args, code, b"", b"")
        code = 1 if self.current in self.failing else 0
        return subprocess.CompletedProcess(args, code, b"", b"")


def prepare(directory, info, files, monkeypatch):
    directory.mkdir(parents=True, exist_ok=True)
    if info is not None:
        (directory / "info.toml").write_text(info, encoding="utf-8")
    for name in files:
        (directory / name).write_text("fn main() {}\n", encoding="utf-8")
    monkeypatch.chdir(directory)
    fake = FakeToolchain()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


@pytest.fixture
def success_dir(tmp_path, monkeypatch):
    return prepare(
        tmp_path / "success", SUCCESS_INFO, ["compSuccess.rs", "testSuccess.rs"],
        monkeypatch,
    )


@pytest.fixture
def failure_dir(tmp_path, monkeypatch):
    return prepare(
        tmp_path / "failure",
        FAILURE_INFO,
        ["compFailure.rs", "compNoExercise.rs", "testFailure.rs", "testNotPassed.rs"],
        monkeypatch,
    )


def test_runs_without_arguments(tmp_path, monkeypatch, capsys):
    prepare(tmp_path, "exercises = []\n", [], monkeypatch)
    (tmp_path / "default_out.txt").write_text("Thanks for installing!", encoding="utf-8")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "welcome to..." in out
    assert "Thanks for installing!" in out


def test_fails_when_in_wrong_dir(tmp_path, monkeypatch, capsys):
    prepare(tmp_path, None, [], monkeypatch)
    assert main([]) == 1
    assert "Try `cd rustdrill/`!" in capsys.readouterr().out


def test_verify_all_success(success_dir):
    assert main(["v"]) == 0
    assert success_dir.compiled == ["compSuccess.rs", "testSuccess.rs"]


def test_verify_all_failure(failure_dir):
    assert main(["v"]) == 1
    assert failure_dir.compiled == ["compFailure.rs"]


def test_verify_long_name(success_dir):
    assert main(["verify"]) == 0


def test_run_single_compile_success(success_dir):
    assert main(["r", "compSuccess.rs"]) == 0


def test_run_single_compile_failure(failure_dir):
    assert main(["r", "compFailure.rs"]) == 1


def test_run_single_test_success(success_dir):
    assert main(["r", "testSuccess.rs"]) == 0


def test_run_single_test_failure(failure_dir):
    assert main(["r", "testFailure.rs"]) == 1


def test_run_single_test_not_passed(failure_dir):
    assert main(["r", "testNotPassed.rs"]) == 1


def test_run_single_test_no_filename(failure_dir, capsys):
    assert main(["r"]) == 1
    assert "Please supply a file name!" in capsys.readouterr().out


def test_run_single_test_no_exercise(failure_dir, capsys):
    assert main(["r", "compNoExercise.rs"]) == 1
    assert "No exercise found for your file name!" in capsys.readouterr().out
    assert failure_dir.compiled == []


def test_run_missing_file(success_dir):
    assert main(["run", "doesNotExist.rs"]) == 1


def test_run_accepts_test_flag(success_dir):
    assert main(["run", "--test", "testSuccess.rs"]) == 0
    assert success_dir.compiled == ["testSuccess.rs"]


def test_run_nested_exercise_path(tmp_path, monkeypatch):
    info = '[[exercises]]\npath = "exercises/if/if1.rs"\nmode = "compile"\n'
    fake = prepare(tmp_path, info, [], monkeypatch)
    nested = tmp_path / "exercises" / "if"
    nested.mkdir(parents=True)
    (nested / "if1.rs").write_text("fn main() {}\n", encoding="utf-8")
    assert main(["r", "exercises/if/if1.rs"]) == 0
    assert fake.compiled == ["if1.rs"]


def test_from_changed_starts_at_edited_exercise(tmp_path):
    exercises = [
        Exercise(Path("exercises/a.rs"), Mode.COMPILE),
        Exercise(Path("exercises/b.rs"), Mode.TEST),
        Exercise(Path("exercises/c.rs"), Mode.COMPILE),
    ]
    changed = tmp_path / "exercises" / "b.rs"
    assert _from_changed(changed, exercises) == exercises[1:]


def test_from_changed_unknown_file(tmp_path):
    exercises = [Exercise(Path("exercises/a.rs"), Mode.COMPILE)]
    assert _from_changed(tmp_path / "other.rs", exercises) == []