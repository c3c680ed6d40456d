"""Utility modules for WRINKL.

This package contains:
- console: Rich-based terminal output utilities
- errors: Custom exceptions and exit codes
- logging: Logging configuration
"""

from wrinkl.utils.console import (
    console,
    print_code,
    print_debug,
    print_error,
    print_header,
    print_info,
    print_step,
    print_success,
    print_warning,
)
from wrinkl.utils.errors import (
    ExitCode,
    LedgerAlreadyArchivedError,
    LedgerExistsError,
    LedgerNotFoundError,
    NameValidationError,
    NotInitializedError,
    TemplateNotFoundError,
    UserCancelledError,
    ValidationKind,
    WrinklError,
)
from wrinkl.utils.logging import log_file_write, log_message, setup_logging

__all__ = [
    # Console
    "console",
    "print_code",
    "print_debug",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "print_step",
    # Errors
    "ExitCode",
    "WrinklError",
    "NotInitializedError",
    "ValidationKind",
    "NameValidationError",
    "LedgerNotFoundError",
    "LedgerExistsError",
    "LedgerAlreadyArchivedError",
    "TemplateNotFoundError",
    "UserCancelledError",
    # Logging
    "setup_logging",
    "log_message",
    "log_file_write",
]
