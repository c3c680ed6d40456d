"""`wrinkl feature`: create a new feature ledger from the project template."""

from dataclasses import dataclass
from pathlib import Path

from wrinkl.config.settings import ProjectPaths, Settings
from wrinkl.ledgers.names import normalize_feature_name, validate_feature_name
from wrinkl.ledgers.store import ActiveListUpdate, LedgerStore
from wrinkl.ledgers.templates import current_date, render_ledger
from wrinkl.ui.interaction import UserInteractionInterface
from wrinkl.utils.console import console, print_info, print_step, print_success, print_warning
from wrinkl.utils.errors import (
    LedgerExistsError,
    NameValidationError,
    NotInitializedError,
    TemplateNotFoundError,
    ValidationKind,
)


@dataclass
class FeatureResult:
    """Outcome of creating a ledger."""

    feature_id: str
    path: Path
    active_update: ActiveListUpdate


def resolve_feature_id(name: str) -> str:
    """Validate a raw feature name and return its canonical identifier.

    Raises:
        NameValidationError: If the name is invalid or normalizes to nothing
    """
    error = validate_feature_name(name)
    if error is not None:
        raise error

    feature_id = normalize_feature_name(name)
    if not feature_id:
        raise NameValidationError(
            "Feature name must contain at least one letter or number",
            ValidationKind.INVALID_CHARACTERS,
        )
    return feature_id


def create_feature(
    name: str,
    paths: ProjectPaths,
    settings: Settings,
    interaction: UserInteractionInterface,
    *,
    summary: str | None = None,
    owner: str | None = None,
) -> FeatureResult:
    """Create the ledger for a new feature and list it in `_active.md`.

    Args:
        name: Feature name as typed by the user
        paths: Project layout
        settings: Loaded configuration (default owner)
        interaction: Prompt implementation
        summary: Summary from --summary; prompted for when missing
        owner: Owner from --owner; prompted for when missing

    Returns:
        The created ledger

    Raises:
        NotInitializedError: If the project has no `.ai` directory
        NameValidationError: If the name is rejected
        LedgerExistsError: If a ledger with the same identifier exists
        TemplateNotFoundError: If `_template.md` is missing
        UserCancelledError: If the user aborts a prompt
    """
    if not paths.is_initialized():
        raise NotInitializedError()

    feature_id = resolve_feature_id(name)
    store = LedgerStore(paths)

    if store.exists(feature_id):
        raise LedgerExistsError(feature_id)

    if not paths.template_file.is_file():
        raise TemplateNotFoundError(str(paths.template_file))

    if not summary:
        summary = interaction.prompt_text("Feature summary (1-2 sentences):", required=True)
    if not owner:
        owner = interaction.prompt_text("Owner:", default=settings.default_owner)

    content = render_ledger(
        paths.template_file.read_text(encoding="utf-8"),
        name=name,
        feature_id=feature_id,
        summary=summary,
        owner=owner,
        date=current_date(),
    )
    ledger_path = store.write_ledger(feature_id, content)

    active_update = store.add_to_active(feature_id, summary)
    if active_update is ActiveListUpdate.ADDED:
        print_info("Added feature to _active.md")
    elif active_update is ActiveListUpdate.NO_ACTIVE_FILE:
        print_warning("_active.md file not found. Feature created but not added to active list.")
    else:
        print_warning(
            'Could not find "Up Next" section in _active.md. '
            "Feature created but not added to active list."
        )

    print_success(f"Created feature ledger: {ledger_path}")
    console.print("\n[warning]To start working on this feature:[/warning]")
    print_step(1, 'Move it to "In Progress" in .ai/ledgers/_active.md')
    print_step(2, f'Reference it in your AI prompts: "Working on {feature_id} feature"')

    return FeatureResult(feature_id=feature_id, path=ledger_path, active_update=active_update)


__all__ = [
    "FeatureResult",
    "resolve_feature_id",
    "create_feature",
]
