"""User interaction abstraction for the workflows.

Workflows never call questionary directly. They receive an implementation
of UserInteractionInterface, which lets the same code run interactively,
under `--yes`, or inside tests.
"""

from abc import ABC, abstractmethod

from wrinkl.ui.prompts import prompt_confirm, prompt_input
from wrinkl.utils.errors import UserCancelledError


def _require_value(value: str) -> bool | str:
    return bool(value.strip()) or "This field is required"


class UserInteractionInterface(ABC):
    """Abstract interface for user interactions."""

    @abstractmethod
    def prompt_text(
        self,
        message: str,
        default: str = "",
        required: bool = False,
    ) -> str:
        """Prompt user for text input.

        Args:
            message: Prompt message to display
            default: Default value if user enters nothing
            required: If True, empty input is not accepted

        Returns:
            User input string

        Raises:
            UserCancelledError: If the user aborts the prompt
        """

    @abstractmethod
    def confirm(
        self,
        message: str,
        default: bool = False,
    ) -> bool:
        """Ask user for yes/no confirmation.

        Args:
            message: Question to ask
            default: Default answer if user presses Enter

        Returns:
            True for yes, False for no

        Raises:
            UserCancelledError: If the user aborts the prompt
        """


class QuestionaryUserInteraction(UserInteractionInterface):
    """Terminal implementation backed by questionary."""

    def prompt_text(
        self,
        message: str,
        default: str = "",
        required: bool = False,
    ) -> str:
        """Prompt for text, re-asking while a required answer is empty."""
        return prompt_input(
            message,
            default=default,
            validate=_require_value if required else None,
        )

    def confirm(
        self,
        message: str,
        default: bool = False,
    ) -> bool:
        """Ask for yes/no confirmation."""
        return prompt_confirm(message, default=default)


class NonInteractiveUserInteraction(UserInteractionInterface):
    """Non-interactive implementation for `--yes`, CI and testing.

    Every prompt resolves to its default. A required text prompt without a
    default cannot be answered and cancels the operation.
    """

    def prompt_text(
        self,
        message: str,
        default: str = "",
        required: bool = False,
    ) -> str:
        """Return the default, or cancel when a required value has none."""
        if required and not default.strip():
            raise UserCancelledError(
                f"Required input in non-interactive mode: {message.rstrip(':')}"
            )
        return default

    def confirm(
        self,
        message: str,
        default: bool = False,
    ) -> bool:
        """Return the default value."""
        return default


__all__ = [
    "UserInteractionInterface",
    "QuestionaryUserInteraction",
    "NonInteractiveUserInteraction",
]
