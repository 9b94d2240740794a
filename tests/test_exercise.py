import os
import subprocess
from pathlib import Path
from unittest import mock

import pytest

from drillbook.exercise import (
    CompilationFailed,
    CompiledExercise,
    ContextLine,
    Exercise,
    ExerciseOutput,
    Mode,
    RunFailed,
    State,
    clean,
    load_exercises,
    temp_file,
)

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return path


def _completed(code=0, stdout=b"", stderr=b""):
    def run(args, **kwargs):
        return subprocess.CompletedProcess(args, code, stdout, stderr)

    return run


def test_pending_state(tmp_path):
    exercise = Exercise(
        "pending_exercise", _write(tmp_path, "pending_exercise.rs", PENDING), Mode.COMPILE, ""
    )
    expected = (
        ContextLine("// fake_exercise", 1, False),
        ContextLine("", 2, False),
        ContextLine("// I AM NOT DONE", 3, True),
        ContextLine("", 4, False),
        ContextLine("fn main() {", 5, False),
    )
    assert exercise.state() == State(expected)
    assert exercise.looks_done() is False


def test_finished_exercise(tmp_path):
    exercise = Exercise(
        "finished_exercise", _write(tmp_path, "finished_exercise.rs", FINISHED), Mode.COMPILE, ""
    )
    assert exercise.state() == State()
    assert exercise.state().done()
    assert exercise.looks_done() is True


def test_marker_on_first_line_context(tmp_path):
    path = _write(tmp_path, "first.rs", "// I AM NOT DONE\n\n#[test]\nfn it_works() {}\n")
    state = Exercise("first", path, Mode.TEST, "").state()
    assert [line.number for line in state.pending] == [1, 2, 3]
    assert state.pending[0].important


def test_clean(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path(temp_file()).touch()
    exercise = Exercise("example", _write(tmp_path, "p.rs", PENDING), Mode.COMPILE, "")
    with mock.patch("subprocess.run", side_effect=_completed()):
        compiled = exercise.compile()
    compiled.close()
    assert not Path(temp_file()).exists()


def test_compile_context_manager_cleans(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = Exercise("example", _write(tmp_path, "p.rs", PENDING), Mode.COMPILE, "")
    with mock.patch("subprocess.run", side_effect=_completed()):
        with exercise.compile() as compiled:
            Path(temp_file()).touch()
            assert isinstance(compiled, CompiledExercise)
    assert not Path(temp_file()).exists()


def test_compile_failure_carries_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = Exercise("broken", _write(tmp_path, "b.rs", PENDING), Mode.COMPILE, "")
    with mock.patch("subprocess.run", side_effect=_completed(1, b"", b"error[E0000]")):
        with pytest.raises(CompilationFailed) as info:
            exercise.compile()
    assert info.value.output == ExerciseOutput("", "error[E0000]")


def test_test_mode_compiles_with_test_flag(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = Exercise("t", _write(tmp_path, "t.rs", FINISHED), Mode.TEST, "")
    with mock.patch("subprocess.run", side_effect=_completed()) as run:
        exercise.compile()
    args = run.call_args.args[0]
    assert args[:2] == ["rustc", "--test"]
    assert temp_file() in args


def test_exercise_with_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = Exercise("exercise_with_output", _write(tmp_path, "s.rs", FINISHED), Mode.TEST, "")
    with mock.patch(
        "subprocess.run", side_effect=_completed(0, b"THIS TEST TOO SHALL PASS\n")
    ) as run:
        out = exercise.compile().run()
    assert "THIS TEST TOO SHALL PASS" in out.stdout
    assert run.call_args.args[0] == [temp_file(), "--show-output"]


def test_run_failure(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = Exercise("f", _write(tmp_path, "f.rs", FINISHED), Mode.COMPILE, "")
    with mock.patch("subprocess.run", side_effect=_completed(101, b"out", b"panicked")):
        with pytest.raises(RunFailed) as info:
            CompiledExercise(exercise).run()
    assert info.value.output.stderr == "panicked"
    assert info.value.output.stdout == "out"


def test_temp_file_contains_pid():
    assert temp_file().startswith(f"./temp_{os.getpid()}_")


def test_clean_without_file_is_harmless(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    clean()
    assert not Path(temp_file()).exists()


def test_display_is_path():
    assert str(Exercise("x", Path("exercises/x.rs"), Mode.TEST, "")) == str(Path("exercises/x.rs"))


def test_load_exercises(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text(
        '[[exercises]]\nname = "intro1"\npath = "exercises/intro/intro1.rs"\n'
        'mode = "compile"\nhint = "Hello!"\n'
        '[[exercises]]\nname = "tests1"\npath = "exercises/tests/tests1.rs"\n'
        'mode = "test"\nhint = ""\n'
    )
    exercises = load_exercises(info)
    assert [e.name for e in exercises] == ["intro1", "tests1"]
    assert [e.mode for e in exercises] == [Mode.COMPILE, Mode.TEST]
    assert exercises[0].hint == "Hello!"


def test_from_dict_rejects_unknown_mode():
    with pytest.raises(ValueError):
        Exercise.from_dict({"name": "a", "path": "a.rs", "mode": "build", "hint": ""})


def test_from_dict_requires_hint():
    with pytest.raises(ValueError, match="hint"):
        Exercise.from_dict({"name": "a", "path": "a.rs", "mode": "test"})