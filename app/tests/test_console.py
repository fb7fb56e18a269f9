"""
Tests for the console implementations.
"""

import io

import pytest
from rich.console import Console

from calclog.console import ConsoleIO, RichConsoleIO, ERROR_PREFIX
from calclog.errors import InvalidInputError


def make_console(answers: str = ""):
    """RichConsoleIO writing to a buffer and reading scripted lines."""
    buffer = io.StringIO()
    console = RichConsoleIO(
        console=Console(file=buffer, width=200, force_terminal=False, color_system=None),
        input_stream=io.StringIO(answers),
    )
    return console, buffer


class TestConsoleIO:
    """Test the interface."""

    def test_console_abstract(self):
        """ConsoleIO should be abstract."""
        with pytest.raises(TypeError):
            ConsoleIO()


class TestRichConsoleIO:
    """Test the rich based console."""

    def test_show_message_with_newline(self):
        """Newline should only be added when asked for."""
        console, buffer = make_console()
        console.show_message("7.0", newline=True)
        console.show_message("next")
        assert buffer.getvalue() == "7.0\nnext"

    def test_show_message_keeps_brackets(self):
        """Brackets should be printed, not read as markup."""
        console, buffer = make_console()
        console.show_message("[red]not markup[/red]", newline=True)
        assert "[red]not markup[/red]" in buffer.getvalue()

    def test_show_error_prefix(self):
        """Errors should carry the error prefix."""
        console, buffer = make_console()
        console.show_error("No se puede dividir entre cero.")
        assert buffer.getvalue().strip() == f"{ERROR_PREFIX}No se puede dividir entre cero."

    def test_show_message_with_pause(self):
        """Pause should wait for Enter before the message."""
        console, buffer = make_console("\n")
        console.show_message("hola", pause=True, clear=True)
        assert buffer.getvalue().endswith("hola")
        assert "Pulse Enter" in buffer.getvalue()

    def test_ask_number(self):
        """A number should be read and parsed."""
        console, buffer = make_console("12.5\n")
        assert console.ask_number("n > ") == 12.5
        assert "n > " in buffer.getvalue()

    def test_ask_number_invalid(self):
        """Non-numeric input should raise InvalidInputError."""
        console, _ = make_console("doce\n")
        with pytest.raises(InvalidInputError):
            console.ask_number()

    def test_ask_operator(self):
        """A valid operator should be returned."""
        console, _ = make_console("/\n")
        assert console.ask_operator() == "/"

    def test_ask_operator_invalid(self):
        """An unsupported operator should raise InvalidInputError."""
        console, _ = make_console("^\n")
        with pytest.raises(InvalidInputError):
            console.ask_operator()

    @pytest.mark.parametrize("answer, expected", [
        ("s", True), ("S", True), ("y", True), ("si", True),
        ("n", False), ("no", False), ("", False), ("maybe", False),
    ])
    def test_ask_option(self, answer, expected):
        """Only affirmative answers should mean yes."""
        console, _ = make_console(answer + "\n")
        assert console.ask_option("¿Continuar? s/n > ") is expected

    def test_ask_option_at_end_of_input(self):
        """End of input should mean no."""
        console, _ = make_console("")
        assert console.ask_option("? ") is False

    def test_custom_affirmative(self):
        """Configured answers should replace the defaults."""
        console = RichConsoleIO(
            console=Console(file=io.StringIO(), force_terminal=False),
            input_stream=io.StringIO("oui\ns\n"),
            affirmative=["oui"],
        )
        assert console.ask_option("? ") is True
        assert console.ask_option("? ") is False
