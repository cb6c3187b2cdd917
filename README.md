# rustdrill

A command-line runner that checks a series of small exercise files, plus a
package of worked drills grouped by topic.

## Requirements

- Python 3.11 or later
- The `rustc` compiler on your `PATH`: the runner calls it to build every
  exercise

## Installing

```
pip install .
```

## The exercise list

The runner reads an `info.toml` file in the current directory listing the
exercises in their recommended order. Each exercise has a `path` and a `mode`:

- `compile`: the file is built with `rustc`; `run` also executes the program
- `test`: the file is built with `rustc --test` and the resulting test binary
  is executed; it must exit successfully

```toml
[[exercises]]
path = "exercises/variables/variables1.rs"
mode = "compile"

[[exercises]]
path = "exercises/tests/tests1.rs"
mode = "test"
```

Each build goes to a temporary binary named `temp_<process id>` in the
current directory, which is removed again once the exercise is checked.

## Usage

Run the command from the directory that holds `info.toml`:

```
rustdrill              # prints a welcome banner and the contents of default_out.txt
rustdrill verify       # checks every exercise in order, stopping at the first failure (alias: v)
rustdrill watch        # verifies, then re-verifies whenever a file under ./exercises changes (alias: w)
rustdrill run FILE     # compiles and runs, or tests, a single exercise (alias: r)
```

- `verify` prints a green line for each exercise that passes. At the first
  one that fails it prints the compiler's error output (or, for a failing test
  run, the test output) and exits with status 1.
- `watch` verifies the whole list once, then waits for `.rs` files under
  `./exercises` to be created or modified. Changes are gathered until none
  arrive for two seconds; verification then restarts from the edited exercise
  to the end of the list. Stop it with Ctrl-C.
- `run FILE` finds the listed exercise whose path the resolved `FILE` ends
  with. A `test` exercise is tested as in `verify`; a `compile` exercise is
  built, run, and its output shown. `-t`/`--test` is accepted, but the mode in
  `info.toml` decides how the file is checked.
- With no command, `default_out.txt` must exist in the current directory.

The command exits with status 1 when `info.toml` is missing from the current
directory, when an exercise fails, when `run` is given no file, or when `run`
names a file that is not listed in `info.toml`.

The same commands are available from Python:

```python
from rustdrill.cli import main

exit_code = main(["verify"])
```

`rustdrill.exercise` holds `Exercise`, `Mode` and `parse_exercise_list`;
`rustdrill.verify` holds `verify`, `compile_only`, `test` and the
`ExerciseFailed` exception they raise; `rustdrill.run` holds `run` and
`compile_and_run`.

## The drills

The `rustdrill.drills` package holds worked solutions, grouped by topic:

- `rustdrill.drills.basics`: `calculate_price`, `times_two`, `is_even`,
  `sale_price`, `square`, `bigger`, `ring_calls`, `describe_ten`
- `rustdrill.drills.primitives`: `greeting`, `classify_char`, `describe_array`,
  `nice_slice`, `describe_cat`, `second_number`, `current_favorite_color`,
  `is_a_color_word`, `make_sausage`, `favorite_snacks`, `my_macro`, `hello`,
  `string_transforms`
- `rustdrill.drills.errors`: `generate_nametag_text`, `total_cost`,
  `spend_tokens`, `read_and_validate`, `pop_too_much`,
  `PositiveNonzeroInteger`, `CreationError`
- `rustdrill.drills.iteration`: `capitalize_first`, `capitalize_words`,
  `capitalize_joined`, `divide`, `divide_all`, `divide_each`, `factorial`,
  `fill_vec`, the errors `DivisionError`, `NotDivisibleError` and
  `DivideByZeroError`, and `ColorClassicStruct`, `ColorTupleStruct` and
  `UnitStruct`
- `rustdrill.drills.concurrency`: `offset_sums`, `run_jobs`, `JobStatus`

```python
from rustdrill.drills.errors import total_cost
from rustdrill.drills.iteration import divide_each

total_cost("34")               # 171
divide_each([27, 297, 81], 27)  # [1, 11, 3]
```

## What this package does not do

The package ships no exercise files, no `info.toml` and no `default_out.txt`.
The runner only checks exercises in a directory you provide, and it does not
compile anything itself: without `rustc` installed, every check fails.

## Running the tests

```
pip install .[test]
pytest
```