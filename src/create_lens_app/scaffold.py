"""Scaffolding pipeline: validate, resolve, clone, patch, install."""

from __future__ import annotations

import enum
import logging
import re
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rich.markup import escape

from .config import get_config, resolve_template
from .errors import DestinationExistsError, InvalidProjectNameError
from .git import fetch_template
from .init import (
    ToolAvailability,
    choose_installer,
    detect_tools,
    install_dependencies,
    patch_package_name,
)
from .reporter import Reporter

logger = logging.getLogger(__name__)

PROJECT_NAME_RE = re.compile(r"^[a-z]+(-[a-z0-9]+)*$")


def is_valid_project_name(name: Optional[str]) -> bool:
    """Lowercase kebab-case: `my-app`, `app2-v2`; not `My-App`, `my_app`, `-app`."""
    return bool(name) and PROJECT_NAME_RE.fullmatch(name or "") is not None


class ScaffoldStage(str, enum.Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    RESOLVING = "resolving"
    CLONING = "cloning"
    PATCHING = "patching"
    INSTALLING = "installing"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class ScaffoldRequest:
    project_name: str
    variant: str


@dataclass(frozen=True)
class ScaffoldResult:
    project_dir: Path
    start_command: str


class Scaffolder:
    """Runs one scaffold request through the pipeline stages in order.

    Tool availability is detected at most once per instance and shared by
    the dependency preview and the installer choice.
    """

    def __init__(
        self,
        reporter: Reporter,
        tools: Optional[ToolAvailability] = None,
        base_dir: Optional[Path] = None,
    ) -> None:
        self.reporter = reporter
        self.base_dir = base_dir
        self.stage = ScaffoldStage.IDLE
        self._tools = tools

    @property
    def tools(self) -> ToolAvailability:
        if self._tools is None:
            self._tools = detect_tools()
        return self._tools

    def _enter(self, stage: ScaffoldStage) -> None:
        logger.debug("Stage %s -> %s", self.stage.value, stage.value)
        self.stage = stage

    def run(self, request: ScaffoldRequest) -> ScaffoldResult:
        try:
            result = self._run(request)
        except BaseException:
            self._enter(ScaffoldStage.FAILED)
            raise
        finally:
            self.reporter.progress_stop()
        self._enter(ScaffoldStage.DONE)
        return result

    def _run(self, request: ScaffoldRequest) -> ScaffoldResult:
        self._enter(ScaffoldStage.VALIDATING)
        if not is_valid_project_name(request.project_name):
            raise InvalidProjectNameError(
                f"Invalid project name {request.project_name!r}: "
                "use the format my-app-name"
            )

        self._enter(ScaffoldStage.RESOLVING)
        config = get_config()
        template = resolve_template(request.variant)
        project_dir = (self.base_dir or Path.cwd()) / request.project_name

        self.reporter.info(
            f"\nInitializing project with template: [cyan]{request.variant}[/cyan] \n"
        )
        if not self.tools.bun:
            self._preview_dependencies(config["dependencies"])

        self._enter(ScaffoldStage.CLONING)
        self.reporter.progress_start()
        fetch_template(template, project_dir, config["main_branch"])

        self._enter(ScaffoldStage.PATCHING)
        patch_package_name(project_dir, request.project_name)

        self._enter(ScaffoldStage.INSTALLING)
        plan = choose_installer(self.tools)
        self.reporter.progress_update("Installing dependencies")
        install_dependencies(plan, project_dir)
        self.reporter.progress_update("")

        return ScaffoldResult(project_dir=project_dir.resolve(), start_command=plan.start_command)

    def _preview_dependencies(self, dependencies: list[str]) -> None:
        if not dependencies:
            return
        self.reporter.progress_stop()
        lines = "\n".join(f"- [cyan]{d}[/cyan]" for d in dependencies)
        self.reporter.info(f"\nInstalling dependencies:\n{lines}\n")


def _describe(exc: BaseException) -> str:
    text = f"{type(exc).__name__}: {exc}"
    stderr = getattr(exc, "stderr", None)
    if isinstance(exc, subprocess.CalledProcessError) and stderr:
        text += f"\n{stderr.strip()}"
    return text


def report_failure(reporter: Reporter, project_name: str, exc: BaseException) -> int:
    """Print the raw error, then the generic notice. Returns the exit code."""
    logger.debug("Scaffolding failed", exc_info=exc)
    reporter.progress_stop()
    reporter.info(escape(_describe(exc)))
    reporter.error(f"\nError: failed to create {project_name}.")
    return 1


def create_project(
    request: ScaffoldRequest,
    reporter: Reporter,
    tools: Optional[ToolAvailability] = None,
    base_dir: Optional[Path] = None,
) -> int:
    """Scaffold a project and report the outcome. Returns the exit code."""
    scaffolder = Scaffolder(reporter, tools=tools, base_dir=base_dir)
    try:
        result = scaffolder.run(request)
    except DestinationExistsError as e:
        logger.debug("Clone target exists: %s", e.path)
        reporter.error("\nError: directory already exists.")
        return 1
    except Exception as e:
        return report_failure(reporter, request.project_name, e)

    reporter.success(f"Created {request.project_name} at {escape(str(result.project_dir))} \n")
    reporter.info(
        "To get started, change into the new directory and run "
        f"[cyan]{result.start_command}[/cyan]"
    )
    return 0
