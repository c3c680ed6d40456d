"""Settings and project path values for WRINKL.

This module defines the Settings dataclass holding user defaults and the
ProjectPaths value locating the `.ai/` structure of a project. Both are
built once at process start and passed explicitly to the workflows.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

# Bundled templates shipped with the package
BUNDLED_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


@dataclass
class Settings:
    """Configuration settings for WRINKL.

    All settings have sensible defaults and can be overridden from the
    configuration files (~/.wrinkl-config, .wrinkl) or the environment.

    Attributes:
        project_type: Default project type offered by `init`
        stack: Default technology stack offered by `init`
        create_cursor_rules: Default answer for creating .cursorrules
        create_augment: Default answer for creating augment.md
        create_copilot: Default answer for creating Copilot instructions
        default_owner: Default ledger owner offered by `feature`
        templates_dir: Custom template directory (empty = bundled templates)
    """

    # Init defaults
    project_type: str = "web app"
    stack: str = "TypeScript, Node.js"
    create_cursor_rules: bool = True
    create_augment: bool = False
    create_copilot: bool = False

    # Feature defaults
    default_owner: str = "Human"

    # Template settings
    templates_dir: str = ""

    # Config key to attribute mapping
    _key_mapping: dict[str, str] = field(
        default_factory=lambda: {
            "PROJECT_TYPE": "project_type",
            "STACK": "stack",
            "CREATE_CURSOR_RULES": "create_cursor_rules",
            "CREATE_AUGMENT": "create_augment",
            "CREATE_COPILOT": "create_copilot",
            "DEFAULT_OWNER": "default_owner",
            "TEMPLATES_DIR": "templates_dir",
        },
        repr=False,
    )

    def get_attribute_for_key(self, key: str) -> str | None:
        """Get the attribute name for a config key.

        Args:
            key: Configuration key (e.g., "PROJECT_TYPE")

        Returns:
            Attribute name or None if key is unknown
        """
        return self._key_mapping.get(key)

    @classmethod
    def get_config_keys(cls) -> list[str]:
        """Get list of all valid configuration keys."""
        temp = cls()
        return list(temp._key_mapping.keys())

    def get_templates_dir(self) -> Path:
        """Resolve the directory templates are copied from.

        Returns:
            The configured templates directory, or the bundled one when unset
        """
        if self.templates_dir:
            return Path(self.templates_dir).expanduser()
        return BUNDLED_TEMPLATES_DIR


@dataclass(frozen=True)
class ProjectPaths:
    """Locations of the AI context structure inside a project.

    Attributes:
        root: Project root directory
        ai_dir: The `.ai` directory
        ledgers_dir: Directory holding active feature ledgers
        archived_dir: Directory holding archived feature ledgers
        active_file: The `_active.md` priority list
        template_file: The `_template.md` ledger template
        project_file: The `project.md` project description
    """

    root: Path
    ai_dir: Path
    ledgers_dir: Path
    archived_dir: Path
    active_file: Path
    template_file: Path
    project_file: Path

    @classmethod
    def for_root(cls, root: Path | None = None) -> ProjectPaths:
        """Build the path layout for a project root (default: CWD)."""
        root = Path(root) if root is not None else Path.cwd()
        ai_dir = root / ".ai"
        ledgers_dir = ai_dir / "ledgers"
        return cls(
            root=root,
            ai_dir=ai_dir,
            ledgers_dir=ledgers_dir,
            archived_dir=ledgers_dir / "archived",
            active_file=ledgers_dir / "_active.md",
            template_file=ledgers_dir / "_template.md",
            project_file=ai_dir / "project.md",
        )

    def is_initialized(self) -> bool:
        """Check whether the `.ai` directory exists."""
        return self.ai_dir.exists()


# Default configuration file path
CONFIG_FILE = Path.home() / ".wrinkl-config"


__all__ = [
    "Settings",
    "ProjectPaths",
    "BUNDLED_TEMPLATES_DIR",
    "CONFIG_FILE",
]
