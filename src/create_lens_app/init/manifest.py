"""Rewrite the name field of a cloned project's package.json."""

from __future__ import annotations

import json
from pathlib import Path

from ..errors import ManifestError


def patch_package_name(project_dir: Path, name: str) -> Path:
    """Set the top-level `name` in <project_dir>/package.json.

    Every other field is kept in its original order. The file is rewritten
    with 2-space indentation. Returns the manifest path.
    """
    package_json_path = project_dir / "package.json"

    with open(package_json_path, "r", encoding="utf-8") as f:
        package_data = json.load(f)

    if not isinstance(package_data, dict):
        raise ManifestError(f"{package_json_path} does not contain a JSON object")

    package_data["name"] = name

    with open(package_json_path, "w", encoding="utf-8") as f:
        f.write(json.dumps(package_data, indent=2, ensure_ascii=False))

    return package_json_path
