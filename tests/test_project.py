import json
import subprocess
from pathlib import Path
from unittest import mock

from drillbook.project import Crate, RustAnalyzerProject


def test_add_path_accepts_rust_files():
    project = RustAnalyzerProject()
    project.add_path("exercises/intro/intro1.rs")
    assert project.crates == [Crate(root_module="exercises/intro/intro1.rs")]
    assert project.crates[0].edition == "2021"
    assert project.crates[0].cfg == ["test"]
    assert project.crates[0].deps == []


def test_add_path_ignores_other_files():
    project = RustAnalyzerProject()
    project.add_path("exercises/intro/README.md")
    project.add_path("exercises/intro")
    assert project.crates == []


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/toolchain/lib")
    project.add_path("exercises/a.rs")
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    loaded = json.loads(target.read_text())
    assert loaded == project.to_dict()
    assert loaded["crates"][0]["root_module"] == "exercises/a.rs"
    assert " " not in target.read_text()


def test_exercises_to_json(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "exercises" / "intro").mkdir(parents=True)
    (tmp_path / "exercises" / "intro" / "intro1.rs").write_text("fn main() {}\n")
    (tmp_path / "exercises" / "intro" / "README.md").write_text("notes\n")
    (tmp_path / "exercises" / "quiz1.rs").write_text("fn main() {}\n")
    project = RustAnalyzerProject()
    project.exercises_to_json("exercises")
    modules = sorted(crate.root_module for crate in project.crates)
    assert modules == sorted(
        [str(Path("exercises/intro/intro1.rs")), str(Path("exercises/quiz1.rs"))]
    )


def test_get_sysroot_src(capsys):
    completed = subprocess.CompletedProcess(["rustc"], 0, b"/toolchain\n", b"")
    project = RustAnalyzerProject()
    with mock.patch("subprocess.run", return_value=completed):
        project.get_sysroot_src()
    assert Path(project.sysroot_src) == Path("/toolchain/lib/rustlib/src/rust/library")
    assert "Determined toolchain: /toolchain" in capsys.readouterr().out