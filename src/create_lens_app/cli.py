"""CLI interface for create-lens-app."""

from __future__ import annotations

import sys
from typing import Dict, Optional

import click

from .config import TemplateConfig, get_config
from .reporter import ConsoleReporter
from .scaffold import (
    ScaffoldRequest,
    create_project,
    is_valid_project_name,
    report_failure,
)
from .utils import configure_logging, console

DEFAULT_APP_NAME = "lens-app"
NAME_FORMAT_HINT = "please enter your app name in the format of my-app-name"


def _validate_project_name(value: str) -> str:
    if not is_valid_project_name(value):
        raise click.BadParameter(NAME_FORMAT_HINT)
    return value


def collect_project_name(app_name: Optional[str]) -> str:
    """Return `app_name` if valid, otherwise prompt until a valid one is given."""
    if app_name and is_valid_project_name(app_name):
        return app_name
    return click.prompt(
        "Enter your app name",
        default=DEFAULT_APP_NAME,
        value_proc=_validate_project_name,
    )


def collect_variant(app_type: Optional[str], templates: Dict[str, TemplateConfig]) -> str:
    """Return `app_type` if it names a template, otherwise ask for one."""
    if app_type in templates:
        return app_type  # type: ignore[return-value]

    for name, cfg in templates.items():
        console.print(f"  [cyan]{name}[/cyan]  {cfg['label']}", highlight=False)
        console.print(f"      {cfg['description']}", style="dim", highlight=False)
    return click.prompt(
        "Select an app type",
        type=click.Choice(list(templates.keys())),
        default=next(iter(templates)),
        show_choices=True,
    )


@click.command("create-lens-app")
@click.argument("app_name", required=False)
@click.option(
    "-t",
    "--type",
    "app_type",
    default=None,
    help="Set the app type as basic, opinionated or pwa",
)
def cli(app_name: Optional[str], app_type: Optional[str]) -> None:
    """Create a new social app with a single command."""
    configure_logging()
    reporter = ConsoleReporter()
    project_name = collect_project_name(app_name)
    try:
        templates = get_config()["templates"]
    except Exception as e:
        sys.exit(report_failure(reporter, project_name, e))
    variant = collect_variant(app_type, templates)
    request = ScaffoldRequest(project_name=project_name, variant=variant)
    code = create_project(request, reporter)
    if code:
        sys.exit(code)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
