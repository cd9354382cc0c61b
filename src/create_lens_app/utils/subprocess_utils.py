"""Subprocess utilities for running commands."""

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)


def run(command: List[str], cwd: Optional[Path] = None) -> None:
    """Run a command and stream output to stdout.

    Raises CalledProcessError when the command exits non-zero.
    """
    logger.debug("Running: %s (cwd=%s)", " ".join(command), cwd)
    process = subprocess.Popen(
        command,
        cwd=str(cwd) if cwd else None,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
    )
    assert process.stdout is not None
    for line in process.stdout:
        sys.stdout.write(line)
    code = process.wait()
    if code:
        raise subprocess.CalledProcessError(code, command)


def run_git_command(
    cmd: List[str], cwd: Optional[Path] = None
) -> subprocess.CompletedProcess[str]:
    """Run a git command, capturing its output.

    The completed process is returned even on failure so callers can inspect
    the exit status.
    """
    logger.debug("Running: %s (cwd=%s)", " ".join(cmd), cwd)
    result = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True)
    if result.returncode:
        logger.debug(
            "Command failed with exit code %s: %s", result.returncode, result.stderr
        )
    return result
