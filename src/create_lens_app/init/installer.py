"""Package manager detection and dependency installation."""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List

from ..utils import run

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolAvailability:
    """Which optional package managers are callable on this host."""

    bun: bool
    yarn: bool


@dataclass(frozen=True)
class InstallPlan:
    tool: str
    command: List[str]
    start_command: str


BUN_PLAN = InstallPlan("bun", ["bun", "install"], "bun dev")
YARN_PLAN = InstallPlan("yarn", ["yarn"], "yarn dev")
NPM_PLAN = InstallPlan("npm", ["npm", "install", "--verbose"], "npm run dev")


def is_tool_installed(tool: str) -> bool:
    """Return True if `<tool> --version` runs successfully."""
    tool_path = shutil.which(tool)
    if tool_path is None:
        return False
    try:
        subprocess.run(
            [tool_path, "--version"],
            check=True,
            capture_output=True,
            text=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return False
    return True


def detect_tools() -> ToolAvailability:
    """Probe the optional package managers once, in priority order."""
    tools = ToolAvailability(bun=is_tool_installed("bun"), yarn=is_tool_installed("yarn"))
    logger.debug("Detected package managers: %s", tools)
    return tools


def choose_installer(tools: ToolAvailability) -> InstallPlan:
    """Pick bun, then yarn, then npm."""
    if tools.bun:
        return BUN_PLAN
    if tools.yarn:
        return YARN_PLAN
    return NPM_PLAN


def install_dependencies(plan: InstallPlan, project_dir: Path) -> None:
    """Run the install command inside the project, streaming its output.

    The tool is resolved on PATH first so `npm.cmd`/`yarn.cmd` shims work on
    Windows.
    """
    executable, *args = plan.command
    tool_path = shutil.which(executable) or executable
    logger.debug("Installing dependencies with %s (%s)", plan.tool, tool_path)
    run([tool_path, *args], cwd=project_dir)
