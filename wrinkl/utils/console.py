"""Rich-based console output utilities.

This module provides the coloured terminal output functions used by every
command. Each message printed here is also written to the log file.
"""

import os

from rich.console import Console
from rich.theme import Theme

from wrinkl import SCRIPT_NAME, __version__

custom_theme = Theme(
    {
        "error": "bold red",
        "success": "bold green",
        "warning": "bold yellow",
        "info": "bold blue",
        "header": "bold blue",
        "step": "bold cyan",
        "highlight": "bold white",
        "muted": "grey50",
        "code": "grey50",
    }
)

# Global console instances
console = Console(theme=custom_theme)
console_err = Console(theme=custom_theme, stderr=True)


def print_error(message: str) -> None:
    """Print error message in red.

    Args:
        message: Error message to display
    """
    from wrinkl.utils.logging import log_message

    console_err.print(f"[error]❌[/error] [red]{message}[/red]")
    log_message(f"ERROR: {message}")


def print_success(message: str) -> None:
    """Print success message in green.

    Args:
        message: Success message to display
    """
    from wrinkl.utils.logging import log_message

    console.print(f"[success]✅[/success] {message}")
    log_message(f"SUCCESS: {message}")


def print_warning(message: str) -> None:
    """Print warning message in yellow.

    Args:
        message: Warning message to display
    """
    from wrinkl.utils.logging import log_message

    console.print(f"[warning]⚠️[/warning]  {message}")
    log_message(f"WARNING: {message}")


def print_info(message: str) -> None:
    """Print info message in blue.

    Args:
        message: Info message to display
    """
    from wrinkl.utils.logging import log_message

    console.print(f"[info]ℹ[/info] {message}")
    log_message(f"INFO: {message}")


def print_debug(message: str) -> None:
    """Print debug message, only when WRINKL_DEBUG is set."""
    if os.environ.get("WRINKL_DEBUG"):
        console.print(f"[muted]🐛 {message}[/muted]")


def print_header(title: str) -> None:
    """Print section header.

    Args:
        title: Header title to display
    """
    console.print()
    console.print(f"[header]🚀 {title}[/header]")
    console.print()


def print_step(number: int, message: str) -> None:
    """Print a numbered next-step line.

    Args:
        number: Step number
        message: Step message to display
    """
    console.print(f"[step]{number}.[/step] {message}")


def print_code(code: str) -> None:
    """Print an indented command the user can copy."""
    console.print(f"[code]   {code}[/code]", highlight=False)


def show_version() -> None:
    """Display version information."""
    console.print(f"[bold]{SCRIPT_NAME}[/bold] v{__version__}")


__all__ = [
    "console",
    "console_err",
    "custom_theme",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_debug",
    "print_header",
    "print_step",
    "print_code",
    "show_version",
]
