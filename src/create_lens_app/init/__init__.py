"""Post-clone project initialization: manifest patching and dependency install."""

from .installer import (
    InstallPlan,
    ToolAvailability,
    choose_installer,
    detect_tools,
    install_dependencies,
    is_tool_installed,
)
from .manifest import patch_package_name

__all__ = [
    "InstallPlan",
    "ToolAvailability",
    "choose_installer",
    "detect_tools",
    "install_dependencies",
    "is_tool_installed",
    "patch_package_name",
]
