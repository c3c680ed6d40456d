"""Tests for wrinkl.workflow.init_project module."""

from unittest.mock import MagicMock

import pytest

from wrinkl.config.settings import Settings
from wrinkl.utils.errors import TemplateNotFoundError, UserCancelledError
from wrinkl.workflow.init_project import (
    AI_DIR_TEMPLATES,
    InitAnswers,
    create_structure,
    gather_answers,
    run_init,
)


def make_answers(**overrides) -> InitAnswers:
    values = {
        "project_name": "Demo",
        "project_type": "CLI tool",
        "stack": "Python",
        "cursor_rules": False,
        "augment": False,
        "copilot": False,
    }
    values.update(overrides)
    return InitAnswers(**values)


class TestCreateStructure:
    """Tests for create_structure function."""

    def test_creates_ai_directory(self, project_paths, settings):
        """The .ai files, ledger template and active list are written."""
        result = create_structure(project_paths, settings, make_answers())

        for _, destination in AI_DIR_TEMPLATES:
            assert (project_paths.ai_dir / destination).is_file()
        assert project_paths.template_file.is_file()
        assert project_paths.active_file.is_file()
        assert project_paths.archived_dir.is_dir()
        assert len(result.created) == len(AI_DIR_TEMPLATES) + 2

    def test_fills_project_placeholders(self, project_paths, settings):
        """project.md gets the answers."""
        create_structure(project_paths, settings, make_answers())

        content = project_paths.project_file.read_text(encoding="utf-8")
        assert content.startswith("# Demo\n")
        assert "**Type:** CLI tool" in content
        assert "**Stack:** Python" in content
        assert "[DATE]" not in content

    def test_ledger_template_copied_verbatim(self, project_paths, settings):
        """The ledger template keeps its placeholders for `feature`."""
        create_structure(project_paths, settings, make_answers())

        content = project_paths.template_file.read_text(encoding="utf-8")
        assert "[Feature Name]" in content
        assert "YYYY-MM-DD" in content

    def test_no_optional_files_by_default(self, project_paths, settings):
        """Assistant files are only written when requested."""
        create_structure(project_paths, settings, make_answers())

        assert not (project_paths.root / ".cursorrules").exists()
        assert not (project_paths.root / "augment.md").exists()
        assert not (project_paths.root / ".github").exists()

    def test_optional_files(self, project_paths, settings):
        """Requested assistant files are written."""
        create_structure(
            project_paths,
            settings,
            make_answers(cursor_rules=True, augment=True, copilot=True),
        )

        assert (project_paths.root / ".cursorrules").is_file()
        assert (project_paths.root / "augment.md").is_file()
        assert (project_paths.root / ".github" / "copilot-instructions.md").is_file()

    def test_custom_templates_dir_missing_file(self, project_paths, tmp_path):
        """An incomplete custom templates directory raises."""
        custom = tmp_path / "custom-templates"
        custom.mkdir()
        settings = Settings(templates_dir=str(custom))

        with pytest.raises(TemplateNotFoundError):
            create_structure(project_paths, settings, make_answers())


class TestGatherAnswers:
    """Tests for gather_answers function."""

    def test_prompts_for_missing_values(self, project_paths, settings, mock_interaction):
        """Every value not given is asked for, with settings as defaults."""
        answers = gather_answers(project_paths, settings, mock_interaction)

        assert answers.project_name == "my-app"
        assert answers.project_type == settings.project_type
        assert answers.stack == settings.stack
        assert mock_interaction.prompt_text.call_count == 3
        assert mock_interaction.confirm.call_count == 3

    def test_options_skip_prompts(self, project_paths, settings, mock_interaction):
        """Values given on the command line are not prompted for."""
        answers = gather_answers(
            project_paths,
            settings,
            mock_interaction,
            name="Demo",
            project_type="library",
            stack="Rust",
            cursor=False,
            with_augment=True,
            with_copilot=True,
        )

        mock_interaction.prompt_text.assert_not_called()
        mock_interaction.confirm.assert_not_called()
        assert answers == InitAnswers("Demo", "library", "Rust", False, True, True)

    def test_non_interactive_uses_settings(self, project_paths, non_interactive):
        """Without prompts the configured defaults apply."""
        settings = Settings(stack="Go", create_cursor_rules=False, create_copilot=True)

        answers = gather_answers(project_paths, settings, non_interactive)

        assert answers.stack == "Go"
        assert answers.cursor_rules is False
        assert answers.copilot is True

    def test_project_name_is_required(self, project_paths, settings):
        """The project name prompt is required."""
        interaction = MagicMock()
        interaction.prompt_text.return_value = "x"

        gather_answers(project_paths, settings, interaction, project_type="t", stack="s")

        interaction.prompt_text.assert_called_once_with(
            "Project name:", default="my-app", required=True
        )


class TestRunInit:
    """Tests for run_init function."""

    def test_initializes(self, project_paths, settings, non_interactive):
        """A fresh project is initialized."""
        result = run_init(project_paths, settings, non_interactive, name="Demo")

        assert result is not None
        assert project_paths.is_initialized()
        assert (project_paths.root / ".cursorrules").is_file()

    def test_declined_overwrite(self, initialized_project, settings, mock_interaction):
        """Declining the overwrite prompt leaves the project untouched."""
        mock_interaction.confirm.return_value = False
        project_file = initialized_project.project_file
        before = project_file.read_text(encoding="utf-8")

        result = run_init(initialized_project, settings, mock_interaction, name="Other")

        assert result is None
        assert project_file.read_text(encoding="utf-8") == before
        mock_interaction.confirm.assert_called_once()

    def test_confirmed_overwrite(self, initialized_project, settings, mock_interaction):
        """Confirming the overwrite rewrites the project files."""
        run_init(initialized_project, settings, mock_interaction, name="Other")

        content = initialized_project.project_file.read_text(encoding="utf-8")
        assert content.startswith("# Other\n")

    def test_keeps_existing_ledgers(
        self, sample_ledger, initialized_project, settings, mock_interaction
    ):
        """Overwriting the structure does not delete feature ledgers."""
        run_init(initialized_project, settings, mock_interaction, name="Other")

        assert sample_ledger.is_file()

    def test_non_interactive_never_overwrites(self, initialized_project, settings, non_interactive):
        """--yes takes the default answer, which is not to overwrite."""
        assert run_init(initialized_project, settings, non_interactive) is None

    def test_cancelled_prompt(self, project_paths, settings, mock_interaction):
        """Cancelling a prompt propagates and writes nothing."""
        mock_interaction.prompt_text.side_effect = UserCancelledError("cancelled")

        with pytest.raises(UserCancelledError):
            run_init(project_paths, settings, mock_interaction)

        assert not project_paths.is_initialized()
