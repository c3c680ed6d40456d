"""Custom exceptions and exit codes for WRINKL.

This module defines the exit codes and exception hierarchy used throughout
the application. Every error carries the exit code the CLI terminates with.
"""

from enum import Enum, IntEnum
from typing import ClassVar


class ExitCode(IntEnum):
    """Process exit codes.

    These codes are used for consistent error reporting and can be
    checked by calling scripts or CI systems.
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    NOT_INITIALIZED = 2
    VALIDATION_ERROR = 3
    USER_CANCELLED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6


class WrinklError(Exception):
    """Base exception for WRINKL errors.

    All custom exceptions in this application should inherit from this class.
    Each exception type has an associated exit code for proper error reporting.

    Attributes:
        exit_code: The exit code to use when this exception causes program termination
        message: The error message
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.GENERAL_ERROR

    def __init__(self, message: str, exit_code: ExitCode | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message describing what went wrong
            exit_code: Optional override for the default exit code
        """
        super().__init__(message)
        self._exit_code = exit_code

    @property
    def exit_code(self) -> ExitCode:
        """Get the exit code for this exception.

        Returns:
            The instance exit code if set, otherwise the class default exit code.
        """
        if self._exit_code is not None:
            return self._exit_code
        return self.__class__._default_exit_code


class NotInitializedError(WrinklError):
    """The project has no `.ai` directory yet."""

    _default_exit_code: ClassVar[ExitCode] = ExitCode.NOT_INITIALIZED

    def __init__(self, message: str = 'No .ai directory found. Run "wrinkl init" first.') -> None:
        super().__init__(message)


class ValidationKind(Enum):
    """Reason a raw feature name was rejected."""

    EMPTY = "empty"
    TOO_LONG = "too_long"
    INVALID_CHARACTERS = "invalid_characters"


class NameValidationError(WrinklError):
    """A feature name failed validation.

    Returned (not raised) by the name validator so callers can decide
    whether to surface it; the creation workflow raises it.

    Attributes:
        kind: Which validation rule the name broke
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.VALIDATION_ERROR

    def __init__(self, message: str, kind: ValidationKind) -> None:
        super().__init__(message)
        self.kind = kind


class LedgerNotFoundError(WrinklError):
    """No ledger exists for the requested identifier.

    Raised when:
    - Archiving a feature whose ledger file is missing

    Attributes:
        feature_id: The normalized identifier that failed to resolve
        suggestions: Known identifiers similar to feature_id
        available: Every known identifier at the time of the lookup
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.NOT_FOUND

    def __init__(
        self,
        feature_id: str,
        suggestions: list[str] | None = None,
        available: list[str] | None = None,
    ) -> None:
        super().__init__(f'Feature ledger "{feature_id}" not found.')
        self.feature_id = feature_id
        self.suggestions = suggestions or []
        self.available = available or []


class LedgerExistsError(WrinklError):
    """A ledger with the requested identifier already exists."""

    _default_exit_code: ClassVar[ExitCode] = ExitCode.ALREADY_EXISTS

    def __init__(self, feature_id: str, message: str | None = None) -> None:
        super().__init__(message or f'Feature ledger "{feature_id}" already exists.')
        self.feature_id = feature_id


class LedgerAlreadyArchivedError(LedgerExistsError):
    """The archive directory already holds a ledger with this identifier."""

    def __init__(self, feature_id: str) -> None:
        super().__init__(feature_id, f'Feature "{feature_id}" is already archived.')


class TemplateNotFoundError(WrinklError):
    """A template file needed to render output does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Template file not found: {path}")
        self.path = path


class UserCancelledError(WrinklError):
    """User cancelled the operation.

    Raised when:
    - User presses Ctrl+C
    - User dismisses a prompt without answering
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.USER_CANCELLED


__all__ = [
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
]
