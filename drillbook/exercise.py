"""Exercises: their description, compilation, execution and completion state."""

from __future__ import annotations

import contextlib
import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from drillbook.ui import no_emoji

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = r"(?m)^\s*///?\s*I\s+AM\s+NOT\s+DONE"
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"

_DONE_PATTERN = re.compile(I_AM_DONE_REGEX)


def temp_file() -> str:
    """Return a temporary binary name unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary binary if it exists."""
    with contextlib.suppress(OSError):
        os.remove(temp_file())


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state; an empty context means the exercise is done."""

    pending: tuple[ContextLine, ...] = ()

    def done(self) -> bool:
        return not self.pending


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished process."""

    stdout: str
    stderr: str

    @classmethod
    def _from_process(cls, process: subprocess.CompletedProcess) -> "ExerciseOutput":
        return cls(
            stdout=process.stdout.decode("utf-8", errors="replace"),
            stderr=process.stderr.decode("utf-8", errors="replace"),
        )


class CompilationFailed(Exception):
    """Compiling an exercise failed."""

    def __init__(self, output: ExerciseOutput):
        super().__init__("compilation failed")
        self.output = output


class RunFailed(Exception):
    """Running a compiled exercise exited unsuccessfully."""

    def __init__(self, output: ExerciseOutput):
        super().__init__("run failed")
        self.output = output


def _execute(args: list[str], what: str) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(args, capture_output=True, check=False)
    except OSError as exc:
        raise RuntimeError(f"Failed to run '{what}' command.") from exc


def _source_lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass
class Exercise:
    """A single exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Exercise":
        try:
            return cls(
                name=str(data["name"]),
                path=Path(data["path"]),
                mode=Mode(data["mode"]),
                hint=str(data["hint"]),
            )
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from None

    def __str__(self) -> str:
        return str(self.path)

    def _rustc(self, *extra: str) -> list[str]:
        return ["rustc", *extra, str(self.path), "-o", temp_file(), *RUSTC_COLOR_ARGS]

    def compile(self) -> "CompiledExercise":
        """Compile the exercise; raise CompilationFailed with the compiler output."""
        if self.mode is Mode.COMPILE:
            process = _execute(self._rustc(), "compile")
        elif self.mode is Mode.TEST:
            process = _execute(self._rustc("--test"), "compile")
        else:
            process = self._clippy()
        if process.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompilationFailed(ExerciseOutput._from_process(process))

    def _clippy(self) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as exc:
            message = (
                "Failed to write Clippy Cargo.toml file."
                if no_emoji()
                else "Failed to write 📎 Clippy 📎 Cargo.toml file."
            )
            raise RuntimeError(message) from exc
        # Build a binary as well so the exercise can be run afterwards.
        _execute(self._rustc(), "compile")
        _execute(
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS],
            "cargo clean",
        )
        return _execute(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
                "-D",
                "clippy::float_cmp",
            ],
            "compile",
        )

    def state(self) -> State:
        """Return Done, or the lines around the first pending marker."""
        source = Path(self.path).read_text(encoding="utf-8")
        if not _DONE_PATTERN.search(source):
            return State()
        lines = _source_lines(source)
        matched = next(
            (index for index, line in enumerate(lines) if _DONE_PATTERN.search(line)),
            None,
        )
        if matched is None:
            raise RuntimeError("This should not happen at all")
        low = max(matched - CONTEXT, 0)
        high = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=index + 1, important=index == matched)
                for index, line in enumerate(lines)
                if low <= index <= high
            )
        )

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed from the source."""
        return self.state().done()


class CompiledExercise:
    """A compiled exercise; closing it removes the temporary binary."""

    def __init__(self, exercise: Exercise):
        self.exercise = exercise

    def run(self) -> ExerciseOutput:
        """Run the binary; raise RunFailed when it exits unsuccessfully."""
        args = [temp_file()]
        if self.exercise.mode is Mode.TEST:
            args.append("--show-output")
        process = _execute(args, "run")
        output = ExerciseOutput._from_process(process)
        if process.returncode != 0:
            raise RunFailed(output)
        return output

    def close(self) -> None:
        clean()

    def __enter__(self) -> "CompiledExercise":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Read the exercise list from a TOML file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    if "exercises" not in data:
        raise ValueError("missing field 'exercises'")
    return [Exercise.from_dict(entry) for entry in data["exercises"]]