"""Clone a template repository and detach it from its origin."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from ..config import TemplateConfig
from ..errors import DestinationExistsError
from ..utils import run_git_command

logger = logging.getLogger(__name__)

# git exits with 128 on fatal errors, including "destination path already exists"
GIT_FATAL_EXIT_CODE = 128


def _check(result: subprocess.CompletedProcess[str]) -> None:
    if result.returncode:
        raise subprocess.CalledProcessError(
            result.returncode, result.args, result.stdout, result.stderr
        )


def clone_template(url: str, destination: Path) -> None:
    """Clone `url` into `destination`.

    Raises DestinationExistsError when git refuses because the target exists.
    """
    existed = destination.exists()
    result = run_git_command(["git", "clone", url, str(destination)])
    if result.returncode == GIT_FATAL_EXIT_CODE and existed:
        raise DestinationExistsError(destination)
    _check(result)


def rename_branch(repo_dir: Path, old: str, new: str) -> None:
    """Rename branch `old` to `new` inside `repo_dir`."""
    _check(run_git_command(["git", "branch", "-m", old, new], cwd=repo_dir))


def remove_remote(repo_dir: Path, name: str = "origin") -> None:
    """Remove a remote from the repository in `repo_dir`."""
    _check(run_git_command(["git", "remote", "rm", name], cwd=repo_dir))


def fetch_template(template: TemplateConfig, destination: Path, main_branch: str) -> None:
    """Clone a template and apply its post-clone adjustments."""
    clone_template(template["url"], destination)
    branch = template.get("branch")
    if branch and branch != main_branch:
        logger.debug("Renaming branch %s -> %s", branch, main_branch)
        rename_branch(destination, branch, main_branch)
    if template.get("detach_remote"):
        logger.debug("Detaching %s from origin", destination)
        remove_remote(destination)
