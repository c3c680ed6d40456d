"""Tests for wrinkl.utils.errors module."""

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


class TestExitCode:
    """Tests for ExitCode enum."""

    def test_exit_code_values(self):
        """Exit codes are stable for calling scripts."""
        assert ExitCode.SUCCESS == 0
        assert ExitCode.GENERAL_ERROR == 1
        assert ExitCode.NOT_INITIALIZED == 2
        assert ExitCode.VALIDATION_ERROR == 3
        assert ExitCode.USER_CANCELLED == 4
        assert ExitCode.NOT_FOUND == 5
        assert ExitCode.ALREADY_EXISTS == 6

    def test_exit_code_is_int(self):
        """Exit codes should be usable as integers."""
        assert int(ExitCode.NOT_FOUND) == 5


class TestWrinklError:
    """Tests for base WrinklError exception."""

    def test_default_exit_code(self):
        """Base exception has GENERAL_ERROR exit code."""
        assert WrinklError("Test error").exit_code == ExitCode.GENERAL_ERROR

    def test_custom_exit_code(self):
        """Can override exit code in constructor."""
        error = WrinklError("Test error", exit_code=ExitCode.NOT_FOUND)
        assert error.exit_code == ExitCode.NOT_FOUND

    def test_message(self):
        """Exception message is accessible."""
        assert str(WrinklError("Test error message")) == "Test error message"


class TestSubclasses:
    """Tests for the specific error types."""

    def test_not_initialized(self):
        """Tells the user to run init."""
        error = NotInitializedError()

        assert error.exit_code == ExitCode.NOT_INITIALIZED
        assert 'Run "wrinkl init" first.' in str(error)
        assert isinstance(error, WrinklError)

    def test_name_validation(self):
        """Carries the broken rule."""
        error = NameValidationError("Feature name is required", ValidationKind.EMPTY)

        assert error.kind is ValidationKind.EMPTY
        assert error.exit_code == ExitCode.VALIDATION_ERROR

    def test_not_found(self):
        """Carries suggestions and available identifiers."""
        error = LedgerNotFoundError("serch", suggestions=["search"], available=["search", "x"])

        assert str(error) == 'Feature ledger "serch" not found.'
        assert error.suggestions == ["search"]
        assert error.available == ["search", "x"]
        assert error.exit_code == ExitCode.NOT_FOUND

    def test_not_found_defaults(self):
        """Suggestions default to empty lists."""
        error = LedgerNotFoundError("serch")

        assert error.suggestions == []
        assert error.available == []

    def test_exists(self):
        """Names the existing feature."""
        error = LedgerExistsError("search")

        assert "already exists" in str(error)
        assert error.exit_code == ExitCode.ALREADY_EXISTS

    def test_already_archived(self):
        """Is a kind of LedgerExistsError."""
        error = LedgerAlreadyArchivedError("search")

        assert str(error) == 'Feature "search" is already archived.'
        assert isinstance(error, LedgerExistsError)
        assert error.exit_code == ExitCode.ALREADY_EXISTS

    def test_template_not_found(self):
        """Names the missing path."""
        error = TemplateNotFoundError("/tmp/x.md")

        assert error.path == "/tmp/x.md"
        assert "/tmp/x.md" in str(error)
        assert error.exit_code == ExitCode.GENERAL_ERROR

    def test_user_cancelled(self):
        """Has USER_CANCELLED exit code."""
        assert UserCancelledError("cancelled").exit_code == ExitCode.USER_CANCELLED
