"""Tests for wrinkl.ui.prompts module."""

from unittest.mock import patch

import pytest

from wrinkl.ui.prompts import custom_style, prompt_confirm, prompt_input
from wrinkl.utils.errors import UserCancelledError


class TestCustomStyle:
    """Tests for custom_style."""

    def test_style_has_qmark(self):
        """Style defines qmark."""
        assert any("qmark" in str(s) for s in custom_style.style_rules)

    def test_style_has_answer(self):
        """Style defines answer."""
        assert any("answer" in str(s) for s in custom_style.style_rules)


class TestPromptConfirm:
    """Tests for prompt_confirm function."""

    @patch("questionary.confirm")
    def test_returns_true_for_yes(self, mock_confirm):
        """Returns True when user confirms."""
        mock_confirm.return_value.ask.return_value = True

        assert prompt_confirm("Continue?") is True

    @patch("questionary.confirm")
    def test_returns_false_for_no(self, mock_confirm):
        """Returns False when user declines."""
        mock_confirm.return_value.ask.return_value = False

        assert prompt_confirm("Continue?") is False

    @patch("questionary.confirm")
    def test_passes_default(self, mock_confirm):
        """The default answer is forwarded."""
        mock_confirm.return_value.ask.return_value = False

        prompt_confirm("Continue?", default=False)

        assert mock_confirm.call_args[1]["default"] is False

    @patch("questionary.confirm")
    def test_raises_on_cancel(self, mock_confirm):
        """Raises UserCancelledError when cancelled."""
        mock_confirm.return_value.ask.return_value = None

        with pytest.raises(UserCancelledError):
            prompt_confirm("Continue?")

    @patch("questionary.confirm")
    def test_raises_on_keyboard_interrupt(self, mock_confirm):
        """Raises UserCancelledError on Ctrl+C."""
        mock_confirm.return_value.ask.side_effect = KeyboardInterrupt

        with pytest.raises(UserCancelledError):
            prompt_confirm("Continue?")


class TestPromptInput:
    """Tests for prompt_input function."""

    @patch("questionary.text")
    def test_returns_input(self, mock_text):
        """Returns the typed text."""
        mock_text.return_value.ask.return_value = "User Authentication"

        assert prompt_input("Name:") == "User Authentication"

    @patch("questionary.text")
    def test_passes_default_and_validator(self, mock_text):
        """Default and validator reach questionary."""
        mock_text.return_value.ask.return_value = "x"

        def validator(value):
            return True

        prompt_input("Name:", default="abc", validate=validator)

        kwargs = mock_text.call_args[1]
        assert kwargs["default"] == "abc"
        assert kwargs["validate"] is validator

    @patch("questionary.text")
    def test_raises_on_cancel(self, mock_text):
        """Raises UserCancelledError when cancelled."""
        mock_text.return_value.ask.return_value = None

        with pytest.raises(UserCancelledError):
            prompt_input("Name:")
