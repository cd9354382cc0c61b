from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional

import pytest

import create_lens_app.config.mapping as mapping_mod
import create_lens_app.git.operations as ops_mod
from create_lens_app.config import resolve_template
from create_lens_app.errors import DestinationExistsError
from create_lens_app.git import clone_template, fetch_template


class Recorder:
    def __init__(self, returncode: int = 0, stderr: str = "") -> None:
        self.calls: List[List[str]] = []
        self.cwds: List[Optional[Path]] = []
        self.returncode = returncode
        self.stderr = stderr

    def run(
        self, cmd: List[str], cwd: Optional[Path] = None
    ) -> subprocess.CompletedProcess[str]:
        self.calls.append(cmd)
        self.cwds.append(cwd)
        return subprocess.CompletedProcess(cmd, self.returncode, "", self.stderr)


@pytest.fixture(autouse=True)
def bundled_config(monkeypatch):
    monkeypatch.delenv(mapping_mod.TEMPLATES_ENV, raising=False)
    mapping_mod.get_config.cache_clear()
    yield
    mapping_mod.get_config.cache_clear()


def test_clone_invokes_git(monkeypatch, tmp_path: Path) -> None:
    rec = Recorder()
    monkeypatch.setattr(ops_mod, "run_git_command", rec.run)

    clone_template("https://example.com/t.git", tmp_path / "my-app")

    assert rec.calls == [["git", "clone", "https://example.com/t.git", str(tmp_path / "my-app")]]


def test_clone_into_existing_directory_raises_destination_exists(
    monkeypatch, tmp_path: Path
) -> None:
    dest = tmp_path / "my-app"
    dest.mkdir()
    rec = Recorder(
        returncode=128,
        stderr="fatal: destination path 'my-app' already exists and is not an empty directory.",
    )
    monkeypatch.setattr(ops_mod, "run_git_command", rec.run)

    with pytest.raises(DestinationExistsError) as excinfo:
        clone_template("https://example.com/t.git", dest)
    assert excinfo.value.path == dest


def test_other_clone_failures_propagate(monkeypatch, tmp_path: Path) -> None:
    rec = Recorder(returncode=128, stderr="fatal: repository not found")
    monkeypatch.setattr(ops_mod, "run_git_command", rec.run)

    with pytest.raises(subprocess.CalledProcessError) as excinfo:
        clone_template("https://example.com/missing.git", tmp_path / "my-app")
    assert excinfo.value.returncode == 128
    assert "repository not found" in excinfo.value.stderr


def test_pwa_renames_branch_and_detaches_origin(monkeypatch, tmp_path: Path) -> None:
    rec = Recorder()
    monkeypatch.setattr(ops_mod, "run_git_command", rec.run)
    dest = tmp_path / "my-app"

    fetch_template(resolve_template("pwa"), dest, "main")

    assert rec.calls == [
        ["git", "clone", "https://github.com/dabit3/lens-pwa", str(dest)],
        ["git", "branch", "-m", "walletconnect", "main"],
        ["git", "remote", "rm", "origin"],
    ]
    assert rec.cwds == [None, dest, dest]


@pytest.mark.parametrize("variant", ["basic", "opinionated"])
def test_other_variants_only_clone(monkeypatch, tmp_path: Path, variant: str) -> None:
    rec = Recorder()
    monkeypatch.setattr(ops_mod, "run_git_command", rec.run)

    fetch_template(resolve_template(variant), tmp_path / "my-app", "main")

    assert len(rec.calls) == 1
    assert rec.calls[0][:2] == ["git", "clone"]


def test_post_clone_steps_skipped_when_clone_fails(monkeypatch, tmp_path: Path) -> None:
    dest = tmp_path / "my-app"
    dest.mkdir()
    rec = Recorder(returncode=128)
    monkeypatch.setattr(ops_mod, "run_git_command", rec.run)

    with pytest.raises(DestinationExistsError):
        fetch_template(resolve_template("pwa"), dest, "main")
    assert len(rec.calls) == 1
