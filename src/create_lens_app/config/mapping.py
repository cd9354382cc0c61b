"""Template variant configuration.

Mapping discovery:
- If $CREATE_LENS_APP_TEMPLATES names a YAML file, load the table from it.
- Otherwise load the `templates.yml` bundled with the package.
- Expose a memoized getter so callers can treat it like a constant.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, List, Optional, TypedDict, cast

import yaml

TEMPLATES_ENV = "CREATE_LENS_APP_TEMPLATES"


class _TemplateRequired(TypedDict):
    label: str  # PWA (Progressive Web App)
    url: str  # https://github.com/dabit3/lens-pwa
    description: str


class TemplateConfig(_TemplateRequired, total=False):
    """Configuration for a single template variant."""

    branch: Optional[str]  # template branch renamed to main_branch after cloning
    detach_remote: bool  # drop `origin` after cloning


class ScaffoldConfig(TypedDict):
    """The whole variant table plus shared settings."""

    main_branch: str
    default: str
    templates: Dict[str, TemplateConfig]
    dependencies: List[str]


def _parse_template(name: str, v: dict[str, Any]) -> TemplateConfig:
    url = v["url"]
    assert isinstance(url, str), f"Template {name} must have a string url"
    label = v.get("label", name)
    assert isinstance(label, str)
    description = v.get("description", "")
    assert isinstance(description, str)
    out = TemplateConfig(label=label, url=url, description=description)
    branch = v.get("branch")
    assert isinstance(branch, str) or branch is None
    if branch:
        out["branch"] = branch
    if v.get("detach_remote"):
        out["detach_remote"] = True
    return out


def _parse_config(data: dict[str, object]) -> ScaffoldConfig:
    templates_section = data.get("templates", {})
    assert isinstance(templates_section, dict)
    templates: Dict[str, TemplateConfig] = {}
    for k, v in templates_section.items():
        assert isinstance(k, str), "Key of templates must be a string"
        templates[k] = _parse_template(k, cast(dict[str, Any], v))
    if not templates:
        raise ValueError("No templates configured")

    default = data.get("default") or next(iter(templates))
    assert isinstance(default, str)
    if default not in templates:
        raise ValueError(f"Default template {default!r} is not configured")

    main_branch = data.get("main_branch", "main")
    assert isinstance(main_branch, str)
    dependencies = data.get("dependencies") or []
    assert isinstance(dependencies, list)
    return ScaffoldConfig(
        main_branch=main_branch,
        default=default,
        templates=templates,
        dependencies=[str(d) for d in dependencies],
    )


def load_config(path: Path) -> ScaffoldConfig:
    """Load the variant table from a YAML file path."""
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    assert isinstance(data, dict)
    return _parse_config(data)


def load_bundled_config() -> ScaffoldConfig:
    """Load the default variant table from the package resources."""
    content = files("create_lens_app.config").joinpath("templates.yml").read_text(
        encoding="utf-8"
    )
    data = yaml.safe_load(content) or {}
    assert isinstance(data, dict)
    return _parse_config(data)


@lru_cache(maxsize=1)
def get_config() -> ScaffoldConfig:
    """Return the variant table, from $CREATE_LENS_APP_TEMPLATES or bundled (memoized)."""
    override = os.getenv(TEMPLATES_ENV)
    if override:
        return load_config(Path(override))
    return load_bundled_config()


def resolve_template(variant: Optional[str]) -> TemplateConfig:
    """Map a variant to its template, falling back to the default variant."""
    config = get_config()
    templates = config["templates"]
    if variant in templates:
        return templates[cast(str, variant)]
    return templates[config["default"]]


def resolve_template_url(variant: Optional[str]) -> str:
    """Return the repository URL for a variant."""
    return resolve_template(variant)["url"]
