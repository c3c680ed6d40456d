"""`wrinkl init`: scaffold the AI context structure in a project.

Creates `.ai/` with the project description files, the ledger template and
the `_active.md` priority list, plus optional assistant configuration files
(`.cursorrules`, `augment.md`, `.github/copilot-instructions.md`).
"""

from dataclasses import dataclass, field
from pathlib import Path

from wrinkl.config.settings import ProjectPaths, Settings
from wrinkl.ledgers.templates import copy_template, current_date
from wrinkl.ui.interaction import UserInteractionInterface
from wrinkl.utils.console import (
    console,
    print_code,
    print_header,
    print_info,
    print_step,
    print_success,
    print_warning,
)
from wrinkl.utils.logging import log_message

# (template path, destination relative to the .ai directory)
AI_DIR_TEMPLATES: tuple[tuple[str, str], ...] = (
    ("ai/README.md", "README.md"),
    ("ai/project.md", "project.md"),
    ("ai/patterns.md", "patterns.md"),
    ("ai/architecture.md", "architecture.md"),
    ("ai/context-rules.md", "context-rules.md"),
)

CURSOR_RULES_TEMPLATE = "cursorrules.md"
AUGMENT_TEMPLATE = "augment.md"
COPILOT_TEMPLATE = "copilot-instructions.md"
LEDGER_TEMPLATE = "ledgers/_template.md"
ACTIVE_TEMPLATE = "ledgers/_active.md"


@dataclass
class InitAnswers:
    """Resolved answers for one `init` run."""

    project_name: str
    project_type: str
    stack: str
    cursor_rules: bool
    augment: bool
    copilot: bool


@dataclass
class InitResult:
    """Files written by `init`."""

    created: list[Path] = field(default_factory=list)


def gather_answers(
    paths: ProjectPaths,
    settings: Settings,
    interaction: UserInteractionInterface,
    *,
    name: str | None = None,
    project_type: str | None = None,
    stack: str | None = None,
    cursor: bool | None = None,
    with_augment: bool = False,
    with_copilot: bool = False,
) -> InitAnswers:
    """Ask for every value not supplied on the command line.

    Args:
        paths: Project layout; the root directory name is the default project name
        settings: Loaded configuration supplying the defaults
        interaction: Prompt implementation
        name: Project name from --name
        project_type: Project type from --type
        stack: Technology stack from --stack
        cursor: --cursor/--no-cursor, None when not given
        with_augment: --with-augment
        with_copilot: --with-copilot

    Returns:
        The resolved answers

    Raises:
        UserCancelledError: If the user aborts a prompt
    """
    if not name:
        name = interaction.prompt_text(
            "Project name:", default=paths.root.resolve().name, required=True
        )
    if not project_type:
        project_type = interaction.prompt_text("Project type:", default=settings.project_type)
    if not stack:
        stack = interaction.prompt_text("Technology stack:", default=settings.stack)
    if cursor is None:
        cursor = interaction.confirm(
            "Create .cursorrules file?", default=settings.create_cursor_rules
        )
    if not with_augment:
        with_augment = interaction.confirm(
            "Create augment.md file?", default=settings.create_augment
        )
    if not with_copilot:
        with_copilot = interaction.confirm(
            "Create GitHub Copilot instructions?", default=settings.create_copilot
        )

    return InitAnswers(
        project_name=name,
        project_type=project_type,
        stack=stack,
        cursor_rules=cursor,
        augment=with_augment,
        copilot=with_copilot,
    )


def create_structure(paths: ProjectPaths, settings: Settings, answers: InitAnswers) -> InitResult:
    """Write the `.ai` structure and optional assistant files.

    Args:
        paths: Project layout
        settings: Configuration locating the templates
        answers: Resolved init answers

    Returns:
        The files that were written

    Raises:
        TemplateNotFoundError: If a template file is missing
    """
    templates = settings.get_templates_dir()
    date = current_date()
    result = InitResult()

    paths.archived_dir.mkdir(parents=True, exist_ok=True)

    project_variables = {
        "PROJECT_NAME": answers.project_name,
        "PROJECT_TYPE": answers.project_type,
        "STACK": answers.stack,
        "DATE": date,
    }
    for template, destination in AI_DIR_TEMPLATES:
        result.created.append(
            copy_template(templates / template, paths.ai_dir / destination, project_variables)
        )

    result.created.append(copy_template(templates / LEDGER_TEMPLATE, paths.template_file))
    result.created.append(
        copy_template(templates / ACTIVE_TEMPLATE, paths.active_file, {"DATE": date})
    )

    if answers.cursor_rules:
        result.created.append(
            copy_template(templates / CURSOR_RULES_TEMPLATE, paths.root / ".cursorrules")
        )
    if answers.augment:
        result.created.append(
            copy_template(templates / AUGMENT_TEMPLATE, paths.root / "augment.md")
        )
    if answers.copilot:
        result.created.append(
            copy_template(
                templates / COPILOT_TEMPLATE,
                paths.root / ".github" / "copilot-instructions.md",
            )
        )

    log_message(f"Initialized AI context system in {paths.root} ({len(result.created)} files)")
    return result


def run_init(
    paths: ProjectPaths,
    settings: Settings,
    interaction: UserInteractionInterface,
    *,
    name: str | None = None,
    project_type: str | None = None,
    stack: str | None = None,
    cursor: bool | None = None,
    with_augment: bool = False,
    with_copilot: bool = False,
) -> InitResult | None:
    """Run the full `init` workflow.

    Command-line values are forwarded to gather_answers; anything missing is
    prompted for.

    Returns:
        The created files, or None when the user declined to overwrite
    """
    print_header("AI Ledger - Context System Setup")

    if paths.is_initialized():
        print_warning("AI context system is already initialized in this directory.")
        if not interaction.confirm(
            "Do you want to overwrite the existing configuration?", default=False
        ):
            print_info("Initialization cancelled.")
            return None

    answers = gather_answers(
        paths,
        settings,
        interaction,
        name=name,
        project_type=project_type,
        stack=stack,
        cursor=cursor,
        with_augment=with_augment,
        with_copilot=with_copilot,
    )

    console.print("Creating AI context structure...")
    result = create_structure(paths, settings, answers)

    print_success("AI context system initialized!")
    console.print("\n[warning]Next steps:[/warning]")
    print_step(1, "Review and customize .ai/project.md")
    print_step(2, "Add project-specific patterns to .ai/patterns.md")
    print_step(3, "Create your first feature ledger:")
    print_code("wrinkl feature my-first-feature")
    print_step(4, "Start coding with AI assistance!")

    return result


__all__ = [
    "InitAnswers",
    "InitResult",
    "gather_answers",
    "create_structure",
    "run_init",
]
