"""Tests for wrinkl.utils.console module."""

from unittest.mock import patch

from wrinkl.utils.console import (
    custom_theme,
    print_code,
    print_debug,
    print_error,
    print_header,
    print_info,
    print_step,
    print_success,
    print_warning,
    show_version,
)


class TestCustomTheme:
    """Tests for custom Rich theme."""

    def test_theme_styles(self):
        """Theme defines the styles the commands use."""
        for name in ("error", "success", "warning", "info", "header", "step", "muted"):
            assert name in custom_theme.styles


class TestPrintFunctions:
    """Tests for print functions."""

    @patch("wrinkl.utils.console.console_err")
    @patch("wrinkl.utils.logging.log_message")
    def test_print_error(self, mock_log, mock_console_err):
        """print_error writes to stderr and logs."""
        print_error("Test error")

        mock_console_err.print.assert_called_once()
        assert "Test error" in mock_console_err.print.call_args[0][0]
        mock_log.assert_called_once_with("ERROR: Test error")

    @patch("wrinkl.utils.console.console")
    @patch("wrinkl.utils.logging.log_message")
    def test_print_success(self, mock_log, mock_console):
        """print_success outputs and logs."""
        print_success("Done")

        assert "Done" in mock_console.print.call_args[0][0]
        mock_log.assert_called_once_with("SUCCESS: Done")

    @patch("wrinkl.utils.console.console")
    @patch("wrinkl.utils.logging.log_message")
    def test_print_warning(self, mock_log, mock_console):
        """print_warning outputs and logs."""
        print_warning("Careful")

        assert "Careful" in mock_console.print.call_args[0][0]
        mock_log.assert_called_once_with("WARNING: Careful")

    @patch("wrinkl.utils.console.console")
    @patch("wrinkl.utils.logging.log_message")
    def test_print_info(self, mock_log, mock_console):
        """print_info outputs and logs."""
        print_info("Note")

        assert "Note" in mock_console.print.call_args[0][0]
        mock_log.assert_called_once_with("INFO: Note")

    @patch("wrinkl.utils.console.console")
    def test_print_header(self, mock_console):
        """print_header surrounds the title with blank lines."""
        print_header("Title")

        assert mock_console.print.call_count == 3
        assert "Title" in mock_console.print.call_args_list[1][0][0]

    @patch("wrinkl.utils.console.console")
    def test_print_step(self, mock_console):
        """print_step numbers the step."""
        print_step(2, "Do it")

        assert "2." in mock_console.print.call_args[0][0]
        assert "Do it" in mock_console.print.call_args[0][0]

    @patch("wrinkl.utils.console.console")
    def test_print_code(self, mock_console):
        """print_code prints the command without highlighting."""
        print_code("wrinkl list")

        assert "wrinkl list" in mock_console.print.call_args[0][0]
        assert mock_console.print.call_args[1]["highlight"] is False

    @patch("wrinkl.utils.console.console")
    def test_print_debug_disabled(self, mock_console):
        """print_debug is silent without WRINKL_DEBUG."""
        print_debug("hidden")

        mock_console.print.assert_not_called()

    @patch("wrinkl.utils.console.console")
    def test_print_debug_enabled(self, mock_console, monkeypatch):
        """print_debug prints with WRINKL_DEBUG set."""
        monkeypatch.setenv("WRINKL_DEBUG", "1")

        print_debug("shown")

        assert "shown" in mock_console.print.call_args[0][0]

    @patch("wrinkl.utils.console.console")
    def test_show_version(self, mock_console):
        """show_version includes the package version."""
        from wrinkl import __version__

        show_version()

        assert __version__ in mock_console.print.call_args[0][0]
