"""CLI interface for WRINKL.

This module provides the Typer-based command-line interface:

    wrinkl init      Initialize the AI context system
    wrinkl feature   Create a new feature ledger (alias: f)
    wrinkl list      List feature ledgers (alias: ls)
    wrinkl archive   Archive a completed feature
    wrinkl config    Show or change configuration
"""

from collections.abc import Callable
from pathlib import Path
from typing import Annotated, TypeVar

import typer

from wrinkl.config.manager import ConfigManager
from wrinkl.config.settings import ProjectPaths, Settings
from wrinkl.ui.interaction import (
    NonInteractiveUserInteraction,
    QuestionaryUserInteraction,
    UserInteractionInterface,
)
from wrinkl.utils.console import (
    print_debug,
    print_error,
    print_info,
    print_success,
    print_warning,
    show_version,
)
from wrinkl.utils.errors import (
    ExitCode,
    LedgerAlreadyArchivedError,
    LedgerNotFoundError,
    UserCancelledError,
    WrinklError,
)
from wrinkl.utils.logging import log_message, setup_logging
from wrinkl.workflow.archive import archive_feature, render_suggestions
from wrinkl.workflow.feature import create_feature
from wrinkl.workflow.init_project import run_init
from wrinkl.workflow.listing import list_features

T = TypeVar("T")

app = typer.Typer(
    name="wrinkl",
    help="AI context management system with ledger-based feature tracking",
    add_completion=False,
    no_args_is_help=True,
)

DirOption = Annotated[
    Path | None,
    typer.Option(
        "--dir",
        help="Project root directory (default: current directory)",
        file_okay=False,
    ),
]
YesOption = Annotated[
    bool,
    typer.Option(
        "--yes",
        "-y",
        help="Accept defaults instead of prompting",
    ),
]


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        show_version()
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
) -> None:
    """WRINKL - AI context management with ledger-based feature tracking."""
    setup_logging()


def _load_settings(project_dir: Path | None) -> Settings:
    """Load configuration once for this invocation."""
    config = ConfigManager(start_dir=project_dir)
    settings = config.load()
    for key in Settings.get_config_keys():
        print_debug(f"{key}={config.get(key)!r} ({config.get_source(key)})")
    return settings


def _interaction(yes: bool) -> UserInteractionInterface:
    if yes:
        return NonInteractiveUserInteraction()
    return QuestionaryUserInteraction()


def _run(action: Callable[[], T]) -> T:
    """Run a workflow, translating errors into messages and exit codes."""
    try:
        return action()

    except UserCancelledError as e:
        print_info(f"\n{e}")
        raise typer.Exit(ExitCode.USER_CANCELLED) from e

    except LedgerNotFoundError as e:
        print_error(str(e))
        render_suggestions(e)
        raise typer.Exit(e.exit_code) from e

    except LedgerAlreadyArchivedError as e:
        print_warning(str(e))
        raise typer.Exit(e.exit_code) from e

    except WrinklError as e:
        print_error(str(e))
        raise typer.Exit(e.exit_code) from e

    except KeyboardInterrupt as e:
        print_info("\nOperation cancelled by user")
        raise typer.Exit(ExitCode.USER_CANCELLED) from e

    except UnicodeDecodeError as e:
        log_message(f"Encoding error: {e}")
        print_error(f"File is not valid UTF-8: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR) from e

    except OSError as e:
        log_message(f"Filesystem error: {e}")
        print_error(f"Filesystem error: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR) from e


@app.command()
def init(
    name: Annotated[
        str | None,
        typer.Option("--name", "-n", help="Project name"),
    ] = None,
    project_type: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Project type (e.g. 'web app')"),
    ] = None,
    stack: Annotated[
        str | None,
        typer.Option("--stack", "-s", help="Technology stack"),
    ] = None,
    cursor: Annotated[
        bool | None,
        typer.Option("--cursor/--no-cursor", help="Create .cursorrules file"),
    ] = None,
    with_augment: Annotated[
        bool,
        typer.Option("--with-augment", help="Include augment.md file"),
    ] = False,
    with_copilot: Annotated[
        bool,
        typer.Option("--with-copilot", help="Include GitHub Copilot instructions"),
    ] = False,
    yes: YesOption = False,
    project_dir: DirOption = None,
) -> None:
    """Initialize AI context system in current directory."""
    paths = ProjectPaths.for_root(project_dir)
    _run(
        lambda: run_init(
            paths,
            _load_settings(project_dir),
            _interaction(yes),
            name=name,
            project_type=project_type,
            stack=stack,
            cursor=cursor,
            with_augment=with_augment,
            with_copilot=with_copilot,
        )
    )


@app.command()
def feature(
    name: Annotated[str, typer.Argument(help="Feature name (e.g. 'User Authentication')")],
    summary: Annotated[
        str | None,
        typer.Option("--summary", help="Feature summary (1-2 sentences)"),
    ] = None,
    owner: Annotated[
        str | None,
        typer.Option("--owner", help="Feature owner (Human, AI or Pair)"),
    ] = None,
    yes: YesOption = False,
    project_dir: DirOption = None,
) -> None:
    """Create a new feature ledger."""
    paths = ProjectPaths.for_root(project_dir)
    _run(
        lambda: create_feature(
            name,
            paths,
            _load_settings(project_dir),
            _interaction(yes),
            summary=summary,
            owner=owner,
        )
    )


@app.command("list")
def list_command(
    include_archived: Annotated[
        bool,
        typer.Option("--all", "-a", help="Include archived features"),
    ] = False,
    project_dir: DirOption = None,
) -> None:
    """List active features."""
    paths = ProjectPaths.for_root(project_dir)
    _run(lambda: list_features(paths, include_archived=include_archived))


@app.command()
def archive(
    name: Annotated[str, typer.Argument(help="Feature name or identifier")],
    yes: YesOption = False,
    project_dir: DirOption = None,
) -> None:
    """Archive a completed feature."""
    paths = ProjectPaths.for_root(project_dir)
    _run(lambda: archive_feature(name, paths, _interaction(yes)))


@app.command()
def config(
    set_value: Annotated[
        str | None,
        typer.Option("--set", metavar="KEY=VALUE", help="Save a configuration value"),
    ] = None,
    local: Annotated[
        bool,
        typer.Option("--local", help="Save to the project .wrinkl file"),
    ] = False,
    project_dir: DirOption = None,
) -> None:
    """Show current configuration, or save a value with --set."""
    manager = ConfigManager(start_dir=project_dir)
    _run(manager.load)

    if set_value is None:
        manager.show()
        return

    key, separator, value = set_value.partition("=")
    if not separator or key not in Settings.get_config_keys():
        valid = ", ".join(Settings.get_config_keys())
        raise typer.BadParameter(
            f"Expected KEY=VALUE with KEY one of: {valid}",
            param_hint="--set",
        )

    scope = "local" if local else "global"
    _run(lambda: manager.save(key, value, scope=scope))
    print_success(f"Saved {key} to {scope} config")


# Short aliases, hidden from --help
app.command("f", hidden=True)(feature)
app.command("ls", hidden=True)(list_command)


__all__ = ["app"]
