"""UI components for WRINKL.

This package contains:
- prompts: Questionary-based user input prompts
- interaction: Ask-text/ask-confirm abstraction used by the workflows
"""

from wrinkl.ui.interaction import (
    NonInteractiveUserInteraction,
    QuestionaryUserInteraction,
    UserInteractionInterface,
)
from wrinkl.ui.prompts import custom_style, prompt_confirm, prompt_input

__all__ = [
    # Prompts
    "custom_style",
    "prompt_confirm",
    "prompt_input",
    # Interaction
    "UserInteractionInterface",
    "QuestionaryUserInteraction",
    "NonInteractiveUserInteraction",
]
