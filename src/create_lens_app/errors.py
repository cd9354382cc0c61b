"""Errors raised while scaffolding a project."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for scaffolding failures"""


class DestinationExistsError(ScaffoldError):
    """Raise when the clone target directory already exists"""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Destination already exists: {path}")
        self.path = path


class InvalidProjectNameError(ScaffoldError):
    """Raise when a project name is not lowercase kebab-case"""


class ManifestError(ScaffoldError):
    """Raise when package.json cannot be patched"""
