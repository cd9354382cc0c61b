"""Utility modules for create_lens_app."""

from .console import console, configure_logging
from .subprocess_utils import run, run_git_command

__all__ = ["console", "configure_logging", "run", "run_git_command"]
