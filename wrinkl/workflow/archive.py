"""`wrinkl archive`: move a completed feature ledger into the archive."""

import logging
from pathlib import Path

from wrinkl.config.settings import ProjectPaths
from wrinkl.ledgers.names import normalize_feature_name
from wrinkl.ledgers.store import LedgerStore
from wrinkl.ledgers.suggest import suggest_similar
from wrinkl.ledgers.templates import current_date
from wrinkl.ui.interaction import UserInteractionInterface
from wrinkl.utils.console import console, print_info, print_success, print_warning
from wrinkl.utils.errors import (
    LedgerAlreadyArchivedError,
    LedgerNotFoundError,
    NotInitializedError,
)

logger = logging.getLogger(__name__)


def build_not_found_error(store: LedgerStore, feature_id: str) -> LedgerNotFoundError:
    """Create the not-found error, with suggestions when they can be computed.

    A failure while scanning for suggestions is logged and dropped so it
    never hides the not-found error itself.
    """
    try:
        available = store.active_ids()
        suggestions = suggest_similar(feature_id, available)
    except OSError as e:
        logger.debug(f"Could not compute suggestions for {feature_id}: {e}")
        return LedgerNotFoundError(feature_id)
    return LedgerNotFoundError(feature_id, suggestions=suggestions, available=available)


def render_suggestions(error: LedgerNotFoundError) -> None:
    """Print the "did you mean" hint for a failed lookup."""
    if error.suggestions:
        console.print("\n[yellow]Did you mean one of these?[/yellow]")
        for name in error.suggestions:
            console.print(f"[cyan]  • {name}[/cyan]")
    elif error.available:
        console.print("\n[muted]Available features:[/muted]")
        for name in error.available:
            console.print(f"[muted]  • {name}[/muted]")
    else:
        console.print("[muted]No feature ledgers found.[/muted]")


def archive_feature(
    name: str,
    paths: ProjectPaths,
    interaction: UserInteractionInterface,
) -> Path | None:
    """Run the `archive` workflow.

    Args:
        name: Feature name or identifier; normalized but not validated
        paths: Project layout
        interaction: Prompt implementation

    Returns:
        Path of the archived ledger, or None when the user declined

    Raises:
        NotInitializedError: If the project has no `.ai` directory
        LedgerNotFoundError: If no active ledger matches
        LedgerAlreadyArchivedError: If the archive already holds this feature
        UserCancelledError: If the user aborts the prompt
    """
    if not paths.is_initialized():
        raise NotInitializedError()

    feature_id = normalize_feature_name(name)
    store = LedgerStore(paths)

    if not feature_id or not store.exists(feature_id):
        raise build_not_found_error(store, feature_id)

    if store.is_archived(feature_id):
        raise LedgerAlreadyArchivedError(feature_id)

    if not interaction.confirm(f'Archive feature "{feature_id}"?', default=True):
        print_info("Archive cancelled.")
        return None

    archived_path = store.archive(feature_id, current_date())

    try:
        if store.remove_from_active(feature_id):
            print_info("Removed feature from _active.md")
    except OSError as e:
        print_warning(f"Could not update _active.md: {e}")

    print_success(f'Feature "{feature_id}" archived successfully.')
    console.print(f"[muted]Moved to: {archived_path}[/muted]")
    return archived_path


__all__ = [
    "build_not_found_error",
    "render_suggestions",
    "archive_feature",
]
