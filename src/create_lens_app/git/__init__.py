"""Git operations for create_lens_app."""

from .operations import (
    GIT_FATAL_EXIT_CODE,
    clone_template,
    fetch_template,
    remove_remote,
    rename_branch,
)

__all__ = [
    "GIT_FATAL_EXIT_CODE",
    "clone_template",
    "fetch_template",
    "remove_remote",
    "rename_branch",
]
