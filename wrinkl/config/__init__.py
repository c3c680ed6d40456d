"""Configuration management for WRINKL.

This package contains:
- settings: Settings dataclass and ProjectPaths layout
- manager: ConfigManager class for loading/saving configuration

Configuration Format
====================
Flat KEY=VALUE lines (environment variable style):

    PROJECT_TYPE="cli tool"
    STACK="Python, Typer"
    DEFAULT_OWNER=Pair
"""

from wrinkl.config.manager import ConfigManager, find_repo_root
from wrinkl.config.settings import BUNDLED_TEMPLATES_DIR, CONFIG_FILE, ProjectPaths, Settings

__all__ = [
    "Settings",
    "ProjectPaths",
    "ConfigManager",
    "find_repo_root",
    "BUNDLED_TEMPLATES_DIR",
    "CONFIG_FILE",
]
