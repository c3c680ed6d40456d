"""Shared pytest fixtures for WRINKL tests."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from wrinkl.config.settings import ProjectPaths, Settings
from wrinkl.ui.interaction import NonInteractiveUserInteraction, UserInteractionInterface
from wrinkl.workflow.init_project import InitAnswers, create_structure

SAMPLE_LEDGER = """# User Authentication

**Summary:** Login and signup with email and password.
**Status:** In Progress
**Owner:** Pair
**Branch:** feat/user-authentication
**Created:** 2024-01-10
**Updated:** 2024-01-12

## Context

Users need accounts.
"""


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch) -> Path:
    """Keep tests away from the user's ~/.wrinkl-config and WRINKL_* variables."""
    config_file = tmp_path_factory.mktemp("home") / ".wrinkl-config"
    monkeypatch.setattr("wrinkl.config.manager.CONFIG_FILE", config_file)
    for key in Settings.get_config_keys():
        monkeypatch.delenv(f"WRINKL_{key}", raising=False)
    monkeypatch.delenv("WRINKL_DEBUG", raising=False)
    return config_file


@pytest.fixture
def settings() -> Settings:
    """Default settings (bundled templates)."""
    return Settings()


@pytest.fixture
def project_paths(tmp_path: Path) -> ProjectPaths:
    """Path layout for an empty, uninitialized project."""
    root = tmp_path / "my-app"
    root.mkdir()
    return ProjectPaths.for_root(root)


@pytest.fixture
def initialized_project(project_paths: ProjectPaths, settings: Settings) -> ProjectPaths:
    """A project with the .ai structure created from the bundled templates."""
    answers = InitAnswers(
        project_name="My App",
        project_type="web app",
        stack="Python, FastAPI",
        cursor_rules=False,
        augment=False,
        copilot=False,
    )
    create_structure(project_paths, settings, answers)
    return project_paths


@pytest.fixture
def sample_ledger(initialized_project: ProjectPaths) -> Path:
    """An active ledger for user-authentication."""
    path = initialized_project.ledgers_dir / "user-authentication.md"
    path.write_text(SAMPLE_LEDGER, encoding="utf-8")
    return path


@pytest.fixture
def non_interactive() -> NonInteractiveUserInteraction:
    """Interaction that answers every prompt with its default."""
    return NonInteractiveUserInteraction()


@pytest.fixture
def mock_interaction() -> MagicMock:
    """Mock interaction; confirms by default."""
    interaction = MagicMock(spec=UserInteractionInterface)
    interaction.confirm.return_value = True
    interaction.prompt_text.side_effect = lambda message, default="", required=False: default
    return interaction
