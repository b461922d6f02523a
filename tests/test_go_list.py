from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from mainseq.errors import DiscoveryError
from mainseq.extractors.go import go_list, is_go_project

GO_LIST_OUTPUT = """{
	"Dir": "/src/mod",
	"ImportPath": "example.com/mod",
	"Name": "mod",
	"GoFiles": ["mod.go"],
	"Imports": ["example.com/mod/store", "fmt"]
}
{
	"Dir": "/src/mod/store",
	"ImportPath": "example.com/mod/store",
	"Name": "store",
	"GoFiles": ["store.go", "memory.go"]
}
{
	"Dir": "/src/mod/internal/gen",
	"ImportPath": "example.com/mod/internal/gen",
	"Name": "gen",
	"GoFiles": ["gen.go"]
}
"""


def _fake_run(stdout: str = "", stderr: str = "", returncode: int = 0):
    calls: list[list[str]] = []

    def run(cmd, **kwargs):
        calls.append(cmd)
        return subprocess.CompletedProcess(cmd, returncode, stdout, stderr)

    run.calls = calls
    return run


def test_discovers_packages_in_go_list_order(monkeypatch) -> None:
    fake = _fake_run(GO_LIST_OUTPUT)
    monkeypatch.setattr(go_list.subprocess, "run", fake)

    packages = go_list.discover_packages(Path("/src/mod"))

    assert fake.calls == [["go", "list", "-json", "./..."]]
    assert packages.names == [
        "example.com/mod",
        "example.com/mod/store",
        "example.com/mod/internal/gen",
    ]
    root = packages["example.com/mod"]
    assert root.name == "mod"
    assert root.imports == ["example.com/mod/store", "fmt"]
    assert root.import_count == 2
    assert root.depended_on_by_count == 0
    assert root.stability is None
    store = packages["example.com/mod/store"]
    assert store.dir == Path("/src/mod/store")
    assert store.go_files == ["store.go", "memory.go"]
    assert store.imports == []


def test_exclude_patterns_drop_packages(monkeypatch) -> None:
    monkeypatch.setattr(go_list.subprocess, "run", _fake_run(GO_LIST_OUTPUT))

    packages = go_list.discover_packages(
        Path("/src/mod"), exclude=["example.com/mod/internal/*"]
    )

    assert "example.com/mod/internal/gen" not in packages
    assert len(packages) == 2


def test_failed_go_list_raises(monkeypatch) -> None:
    monkeypatch.setattr(
        go_list.subprocess,
        "run",
        _fake_run(stderr="go: cannot find main module", returncode=1),
    )
    with pytest.raises(DiscoveryError, match="cannot find main module"):
        go_list.discover_packages(Path("/nowhere"))


def test_missing_go_binary_raises(monkeypatch) -> None:
    def run(cmd, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", "go")

    monkeypatch.setattr(go_list.subprocess, "run", run)
    with pytest.raises(DiscoveryError, match="Could not run go list"):
        go_list.discover_packages(Path("/src/mod"))


def test_malformed_output_raises(monkeypatch) -> None:
    monkeypatch.setattr(go_list.subprocess, "run", _fake_run('{"ImportPath": '))
    with pytest.raises(DiscoveryError, match="JSON parse error"):
        go_list.discover_packages(Path("/src/mod"))


def test_is_go_project(tmp_path: Path) -> None:
    assert not is_go_project(tmp_path)
    (tmp_path / "go.mod").write_text("module example.com/mod\n")
    assert is_go_project(tmp_path)
