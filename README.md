# rustlings

Worked solutions to a set of small programming exercises, written as plain
Python functions and classes, together with two helpers: coloured status
lines for a terminal, and a generator for the `rust-project.json` file that
rust-analyzer reads.

## Installing

```
pip install .
```

Python 3.11 or later is needed. The only dependency is `rich`.

## Status lines: `rustlings.ui`

```python
from rustlings.ui import success, warn, no_emoji

success("Successfully ran intro1")   # green, prefixed with ✅
warn("Compiling of intro2 failed!")  # red, prefixed with ⚠️
```

When the `NO_EMOJI` environment variable is set, `no_emoji()` returns
`True` and the marks become `✓` and `!`.

## rust-analyzer project file: `rustlings.project`

`RustAnalyzerProject` holds `sysroot_src` and a list of `Crate` entries.

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()          # RUST_SRC_PATH, or asks `rustc --print sysroot`
project.exercises_to_json()        # one Crate per .rs file below ./exercises
project.write_to_disk()            # writes ./rust-project.json
```

- `get_sysroot_src()` uses `RUST_SRC_PATH` when it is set; otherwise it runs
  `rustc --print sysroot`, prints the toolchain it found and points at its
  `lib/rustlib/src/rust/library` folder.
- `exercises_to_json(root="./exercises")` walks the folder recursively and
  calls `path_to_json(path)` for each entry; only `.rs` files are added.
- Each `Crate` has `root_module`, `edition` (`"2021"`), `deps` (empty) and
  `cfg` (`["test"]`).
- `to_json()` returns the compact JSON text; `write_to_disk(path)` writes it.

## Worked solutions: `rustlings.lessons`

One module per topic:

- `quizzes` — `calculate_price_of_apples`, `transformer` with `Command` and
  `Append`, and a generic `ReportCard`.
- `errors` — `generate_nametag_text`, `total_cost`, `spend_tokens`,
  `PositiveNonzeroInteger` with `NegativeError` and `ZeroError`, and
  `parse_pos_nonzero`, which raises `ParsePosNonzeroError` carrying the
  underlying `cause`.
- `enums` — `ChangeColor`, `Echo`, `Move` and `Quit` messages applied to a
  `State` by `State.process`.
- `hashmaps` — `fruit_basket`, `fill_basket` with the `Fruit` enum, and
  `build_scores_table`, which returns `Team` records.
- `iterators` — `capitalize_first`, `capitalize_words_vector`,
  `capitalize_words_string`, `divide` with `NotDivisibleError` and
  `DivideByZeroError`, `result_with_list`, `list_of_results`, `factorial`,
  and the `Progress` counters `count_for`, `count_iterator`,
  `count_collection_for` and `count_collection_iterator`.
- `conditions` — `bigger`, `foo_if_fizz`, `animal_habitat`.
- `structs` — `ColorClassic`, `ColorTuple`, `UnitLike`, `Order` with
  `create_order_template`, and `Package`.
- `traits` — `append_bar` for strings and lists of strings, `Licensed`,
  `SomeSoftware`, `OtherSoftware` and `compare_license_types`.
- `basics` — string helpers, `sale_price`, `is_even`, `square`,
  `array_and_vec`, `vec_loop`, `vec_map`, `maybe_icecream` and `Wrapper`.
- `pointers` — the cons list `Cons` with `create_empty_list` and
  `create_non_empty_list`, and the copy-on-write `Cow` used by `abs_all`.

A few examples:

```python
from rustlings.lessons.quizzes import Append, Command, transformer
from rustlings.lessons.errors import NegativeError, ParsePosNonzeroError, parse_pos_nonzero
from rustlings.lessons.pointers import Cow, abs_all

transformer([("hello", Command.UPPERCASE), ("foo", Append(1))])
# ['HELLO', 'foobar']

try:
    parse_pos_nonzero("-555")
except ParsePosNonzeroError as err:
    assert isinstance(err.cause, NegativeError)

abs_all(Cow.borrowed([-1, 0, 1])).owned   # True: the data was copied
abs_all(Cow.borrowed([0, 1, 2])).owned    # False: nothing needed changing
```

## What this package does not do

There is no command-line program. The package does not read an exercise
list, does not compile, run, test, verify, reset or watch exercises, and
does not track progress through them. The only external program it starts
is `rustc --print sysroot`, from `RustAnalyzerProject.get_sysroot_src`.

## Running the tests

```
pip install ".[test]"
pytest
```