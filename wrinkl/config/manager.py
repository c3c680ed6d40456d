"""Configuration manager for WRINKL.

This module provides the ConfigManager class for loading, saving, and
showing configuration values with a cascading hierarchy:

    1. Environment Variables (WRINKL_<KEY>, highest priority)
    2. Local Config (.wrinkl in project/parent directories)
    3. Global Config (~/.wrinkl-config)
    4. Built-in Defaults (lowest priority)
"""

from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path
from typing import Literal

from wrinkl.config.settings import CONFIG_FILE, Settings
from wrinkl.utils.console import console, print_header, print_info
from wrinkl.utils.logging import log_message

# Environment overrides are namespaced, e.g. WRINKL_STACK overrides STACK
ENV_PREFIX = "WRINKL_"

_LINE_PATTERN = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)=(.*)$")
_KEY_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


def find_repo_root(start: Path | None = None) -> Path | None:
    """Find the git repository root by looking for a .git directory.

    Args:
        start: Directory to start from (default: CWD)

    Returns:
        Path to repository root, or None if not in a repository
    """
    current = start or Path.cwd()
    while True:
        if (current / ".git").exists():
            return current

        parent = current.parent
        if parent == current:  # Reached filesystem root
            break
        current = parent

    return None


class ConfigManager:
    """Manages configuration loading and saving with cascading hierarchy.

    Configuration Precedence (highest to lowest):
    1. Environment Variables - CI/CD, temporary overrides
    2. Local Config (.wrinkl) - Project-specific settings
    3. Global Config (~/.wrinkl-config) - User defaults
    4. Built-in Defaults - Fallback values

    Attributes:
        settings: Current settings instance
        global_config_path: Path to global ~/.wrinkl-config file
        local_config_path: Path to discovered local .wrinkl file (after load)
    """

    LOCAL_CONFIG_NAME = ".wrinkl"

    def __init__(
        self,
        global_config_path: Path | None = None,
        start_dir: Path | None = None,
    ) -> None:
        """Initialize the configuration manager.

        Args:
            global_config_path: Optional custom path to global config file.
                                Defaults to ~/.wrinkl-config.
            start_dir: Directory the local config search starts from.
                       Defaults to the current working directory.
        """
        self.global_config_path = global_config_path or CONFIG_FILE
        self.start_dir = start_dir
        self.local_config_path: Path | None = None
        self.settings = Settings()
        self._raw_values: dict[str, str] = {}
        self._config_sources: dict[str, str] = {}

    def load(self) -> Settings:
        """Load configuration from all sources with cascading precedence.

        Each call starts from clean defaults so repeated loads never keep
        stale values.

        Returns:
            Settings instance with loaded values
        """
        self.settings = Settings()
        self.local_config_path = None
        self._raw_values = {}
        self._config_sources = {}

        if self.global_config_path.exists():
            log_message(f"Loading global configuration from {self.global_config_path}")
            self._load_file(self.global_config_path, source="global")

        local_path = self._find_local_config()
        if local_path:
            self.local_config_path = local_path
            log_message(f"Loading local configuration from {local_path}")
            self._load_file(local_path, source=f"local ({local_path})")

        self._load_environment()

        for key, value in self._raw_values.items():
            self._apply_value_to_settings(key, value)

        log_message(f"Configuration loaded successfully ({len(self._raw_values)} keys)")
        return self.settings

    def _find_local_config(self) -> Path | None:
        """Find local .wrinkl config by traversing up from the start directory.

        Stops at the first .wrinkl file, at a directory containing .git,
        or at the filesystem root.

        Returns:
            Path to local config file, or None if not found
        """
        current = self.start_dir or Path.cwd()
        while True:
            config_path = current / self.LOCAL_CONFIG_NAME
            if config_path.is_file():
                return config_path

            if (current / ".git").exists():
                break

            parent = current.parent
            if parent == current:
                break
            current = parent

        return None

    def _load_file(self, path: Path, source: str = "file") -> None:
        """Load key=value pairs from a config file.

        Args:
            path: Path to the config file
            source: Source identifier for debugging
        """
        for key, value in self._read_file_values(path).items():
            self._raw_values[key] = value
            self._config_sources[key] = source

    def _load_environment(self) -> None:
        """Override config with WRINKL_-prefixed environment variables for known keys."""
        for key in Settings.get_config_keys():
            env_value = os.environ.get(f"{ENV_PREFIX}{key}")
            if env_value is not None:
                self._raw_values[key] = env_value
                self._config_sources[key] = "environment"

    def _apply_value_to_settings(self, key: str, value: str) -> None:
        """Apply a raw config value to the settings object.

        Args:
            key: Configuration key
            value: Raw string value from file
        """
        attr = self.settings.get_attribute_for_key(key)
        if attr is None:
            return  # Unknown key, ignore

        current_value = getattr(self.settings, attr)

        if isinstance(current_value, bool):
            setattr(self.settings, attr, value.lower() in ("true", "1", "yes"))
        else:
            setattr(self.settings, attr, value)

    def save(
        self,
        key: str,
        value: str,
        scope: Literal["global", "local"] = "global",
    ) -> None:
        """Save a configuration value to a config file and reload.

        If scope="local" and no local config exists yet, a .wrinkl file is
        created at the repository root, or in the start directory when no
        repository is found.

        Args:
            key: Configuration key (must match pattern: [a-zA-Z_][a-zA-Z0-9_]*)
            value: Configuration value to save
            scope: Target config file - "global" or "local"

        Raises:
            ValueError: If key name is invalid or scope is unknown
        """
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"Invalid config key: {key}")

        if scope not in ("global", "local"):
            raise ValueError(f"Invalid scope: {scope}. Must be 'global' or 'local'")

        if scope == "local":
            if self.local_config_path is None:
                start = self.start_dir or Path.cwd()
                repo_root = find_repo_root(start)
                self.local_config_path = (repo_root or start) / self.LOCAL_CONFIG_NAME
            target_path = self.local_config_path
        else:
            target_path = self.global_config_path

        existing_lines: list[str] = []
        if target_path.exists():
            existing_lines = target_path.read_text(encoding="utf-8").splitlines()

        new_lines: list[str] = []
        written = False
        escaped_value = self._escape_value_for_storage(value)

        for line in existing_lines:
            match = _LINE_PATTERN.match(line.strip())
            if match and match.group(1) == key:
                new_lines.append(f'{key}="{escaped_value}"')
                written = True
            else:
                # Comments, other keys and malformed lines are preserved
                new_lines.append(line)

        if not written:
            new_lines.append(f'{key}="{escaped_value}"')

        self._atomic_write_to_path(new_lines, target_path)
        log_message(f"Configuration saved to {scope}: {key}")

        self.load()

    def _read_file_values(self, path: Path) -> dict[str, str]:
        """Read key=value pairs from a config file without modifying state.

        Args:
            path: Path to the config file

        Returns:
            Dictionary of key-value pairs
        """
        values: dict[str, str] = {}

        if not path.exists():
            return values

        with path.open(encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                match = _LINE_PATTERN.match(line)
                if match:
                    key, value = match.groups()
                    # Only unescape for double-quoted values (single quotes are literal)
                    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
                        value = self._unescape_value(value[1:-1])
                    elif len(value) >= 2 and value.startswith("'") and value.endswith("'"):
                        value = value[1:-1]
                    values[key] = value
        return values

    def _atomic_write_to_path(self, lines: list[str], target_path: Path) -> None:
        """Atomically write lines to a specific config file.

        Args:
            lines: Lines to write
            target_path: Path to write to
        """
        target_path.parent.mkdir(parents=True, exist_ok=True)

        fd, temp_path = tempfile.mkstemp(
            dir=target_path.parent,
            prefix=".wrinkl-config-",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write("\n".join(lines))
                if lines:
                    f.write("\n")

            Path(temp_path).replace(target_path)
        except Exception:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise

    @staticmethod
    def _escape_value_for_storage(value: str) -> str:
        """Escape backslashes and double quotes for double-quoted storage."""
        result = value.replace("\\", "\\\\")
        result = result.replace('"', '\\"')
        return result

    @staticmethod
    def _unescape_value(value: str) -> str:
        """Reverse _escape_value_for_storage."""
        result = value.replace("\\\\", "\\")
        result = result.replace('\\"', '"')
        return result

    def get(self, key: str, default: str = "") -> str:
        """Get a raw configuration value.

        Args:
            key: Configuration key to retrieve
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._raw_values.get(key, default)

    def get_source(self, key: str) -> str:
        """Describe where a key's effective value came from."""
        return self._config_sources.get(key, "default")

    def show(self) -> None:
        """Display current configuration using Rich formatting."""
        print_header("Current Configuration")

        print_info(f"Global config: {self.global_config_path}")
        if self.local_config_path:
            print_info(f"Local config:  {self.local_config_path}")
        else:
            print_info("Local config:  (not found)")
        console.print()

        s = self.settings

        console.print("  [bold]Init Defaults:[/bold]")
        console.print(f"    Project Type: {s.project_type}")
        console.print(f"    Stack: {s.stack}")
        console.print(f"    Create .cursorrules: {s.create_cursor_rules}")
        console.print(f"    Create augment.md: {s.create_augment}")
        console.print(f"    Create Copilot Instructions: {s.create_copilot}")
        console.print()

        console.print("  [bold]Feature Defaults:[/bold]")
        console.print(f"    Default Owner: {s.default_owner}")
        console.print(f"    Templates: {s.templates_dir or '(bundled)'}")
        console.print()


__all__ = [
    "ENV_PREFIX",
    "ConfigManager",
    "find_repo_root",
]
