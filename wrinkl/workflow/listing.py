"""`wrinkl list`: show active and archived feature ledgers."""

from rich.markup import escape

from wrinkl.config.settings import ProjectPaths
from wrinkl.ledgers.store import LedgerStore, LedgerSummary
from wrinkl.utils.console import console, print_header, print_warning
from wrinkl.utils.errors import NotInitializedError


def status_style(status: str) -> str:
    """Pick the rich style for a ledger status.

    Later matches win, so "Blocked (was In Progress)" renders as blocked.
    """
    style = "muted"
    if "In Progress" in status:
        style = "yellow"
    if "Complete" in status:
        style = "green"
    if "Blocked" in status:
        style = "red"
    return style


def _print_active(ledger: LedgerSummary) -> None:
    console.print(f"\n[cyan]•[/cyan] [bold]{escape(ledger.title)}[/bold]")
    console.print(f"  [muted]File:[/muted] {escape(ledger.file_name)}")
    console.print(f"  [muted]Summary:[/muted] {escape(ledger.summary)}")
    style = status_style(ledger.status)
    console.print(f"  [muted]Status:[/muted] [{style}]{escape(ledger.status)}[/{style}]")


def _print_archived(ledger: LedgerSummary) -> None:
    console.print(f"\n[muted]•[/muted] [dim]{escape(ledger.title)}[/dim]")
    console.print(f"  [muted]File:[/muted] archived/{escape(ledger.file_name)}")
    console.print(f"  [muted]Summary:[/muted] [dim]{escape(ledger.summary)}[/dim]")


def list_active_features(store: LedgerStore) -> list[LedgerSummary]:
    """Print every active ledger.

    Returns:
        The ledgers that were printed
    """
    if not store.paths.ledgers_dir.is_dir():
        print_warning("No ledgers directory found.")
        return []

    ledgers = store.active_ledgers()
    if not ledgers:
        console.print("[muted]No active feature ledgers found.[/muted]")
        console.print("[yellow]Create your first feature with: wrinkl feature my-feature[/yellow]")
        return []

    console.print("[info]📋 Active Features:[/info]")
    for ledger in ledgers:
        _print_active(ledger)
    return ledgers


def list_archived_features(store: LedgerStore) -> list[LedgerSummary]:
    """Print every archived ledger.

    Returns:
        The ledgers that were printed
    """
    ledgers = store.archived_ledgers()
    if not ledgers:
        console.print("[muted]No archived features found.[/muted]")
        return []

    console.print("[info]📦 Archived Features:[/info]")
    for ledger in ledgers:
        _print_archived(ledger)
    return ledgers


def list_features(paths: ProjectPaths, *, include_archived: bool = False) -> list[LedgerSummary]:
    """Run the `list` workflow.

    Args:
        paths: Project layout
        include_archived: Also list archived ledgers (--all)

    Returns:
        Every ledger that was printed, active first

    Raises:
        NotInitializedError: If the project has no `.ai` directory
    """
    if not paths.is_initialized():
        raise NotInitializedError()

    store = LedgerStore(paths)
    project = store.read_project_info()
    if project is not None and project.name:
        print_header(f"Feature Ledgers - {project.name}")
    else:
        print_header("Feature Ledgers")

    shown = list_active_features(store)
    if include_archived:
        console.print()
        shown += list_archived_features(store)
    return shown


__all__ = [
    "status_style",
    "list_active_features",
    "list_archived_features",
    "list_features",
]
