"""Configuration management for create_lens_app."""

from .mapping import (
    TEMPLATES_ENV,
    ScaffoldConfig,
    TemplateConfig,
    get_config,
    load_config,
    resolve_template,
    resolve_template_url,
)

__all__ = [
    "TEMPLATES_ENV",
    "ScaffoldConfig",
    "TemplateConfig",
    "get_config",
    "load_config",
    "resolve_template",
    "resolve_template_url",
]
