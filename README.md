# drillbook

drillbook works with a set of small exercises. Each exercise is a source
file that contains a mistake, such as a syntax error, a failing test or a
logic error. It stays pending while it contains an `I AM NOT DONE` marker
comment. drillbook reads the list of exercises, compiles and runs them
with `rustc`, and tells you which ones still carry the marker. It also
ships worked solutions for many of the exercises as plain Python functions.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra:

```
pip install ".[test]"
pytest
```

Compiling and running exercises needs `rustc` on your `PATH`. Clippy
exercises also need `cargo`.

## Exercises

`drillbook.exercise.load_exercises(path="info.toml")` reads a TOML file
with an `exercises` array. Each entry has the fields `name`, `path`,
`mode` (`compile`, `test` or `clippy`) and `hint`. The function returns a
list of `Exercise` objects.

```python
from drillbook.exercise import load_exercises, CompilationFailed, RunFailed

for exercise in load_exercises("info.toml"):
    state = exercise.state()
    if state.done():
        print(exercise.name, "done")
        continue
    for line in state.pending:
        marker = ">" if line.important else " "
        print(f"{marker}{line.number:>3} | {line.line}")
```

`Exercise.state()` returns a `State`. When the file has no marker, its
`pending` tuple is empty. Otherwise it holds the `ContextLine`s from two
lines before the first marker to two lines after it. `looks_done()` is a
shortcut for `state().done()`.

`Exercise.compile()` builds the exercise into a temporary binary in the
current directory. It returns a `CompiledExercise`, or raises
`CompilationFailed` with the compiler's `ExerciseOutput` on `.output`.
Test exercises are built with `--test`. Clippy exercises also write
`exercises/clippy/Cargo.toml` and run `cargo clippy` with warnings
treated as errors. `CompiledExercise.run()` runs the binary. Test binaries
get `--show-output`. It returns the `ExerciseOutput` (`stdout`, `stderr`),
or raises `RunFailed` when the binary exits unsuccessfully. The compiled
exercise is a context manager, and closing it removes the temporary binary:

```python
try:
    with exercise.compile() as compiled:
        print(compiled.run().stdout)
except (CompilationFailed, RunFailed) as error:
    print(error.output.stderr or error.output.stdout)
```

## Editor support

`drillbook.project.RustAnalyzerProject` builds the contents of a
`rust-project.json` file for rust-analyzer:

```python
from drillbook.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()              # asks `rustc --print sysroot`
project.exercises_to_json("exercises") # one Crate per .rs file
project.write_to_disk("rust-project.json")
```

Each `Crate` uses edition 2021, has no dependencies, and sets the `test`
cfg.

## Status messages

`drillbook.ui.warn(message)` prints a red line and
`drillbook.ui.success(message)` prints a green one. Each returns the text
it printed. When the `NO_EMOJI` environment variable is set, plain `!` and
`✓` symbols replace the emoji.

## Worked solutions

The `drillbook.lessons` package holds working solutions, grouped by topic
into `quizzes`, `errors`, `enums`, `hashmaps`, `conditionals`,
`iterators`, `shared`, `options`, `strings`, `traits`, `vecs`, `threads`
and `basics`.

```python
from drillbook.lessons.quizzes import calculate_price_of_apples
from drillbook.lessons.errors import parse_pos_nonzero
from drillbook.lessons.iterators import factorial

calculate_price_of_apples(41)   # 41
parse_pos_nonzero("42").value   # 42
factorial(4)                    # 24
```

## What drillbook does not do

drillbook is a library only. It installs no command. It has no watch
mode that re-checks exercises when files change, no command that verifies
all exercises in order, and no commands to list exercises, print hints or
reset an exercise. You can build these from `load_exercises`,
`Exercise.compile`, `CompiledExercise.run` and `Exercise.state`.