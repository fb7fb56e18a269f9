"""
Console Module

Talks to the user: prints messages and errors, asks for
operands, operators and yes/no answers.

ConsoleIO is the interface the menu depends on. RichConsoleIO
draws with rich; tests can feed it an input stream.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional, TextIO

from rich.console import Console
from rich.markup import escape

from .calculator import parse_number, parse_operator

ERROR_PREFIX = "*ERROR* "
NUMBER_PROMPT = "Introduzca un número > "
OPERATOR_PROMPT = "Introduzca un operador (+ - * /) > "
PAUSE_PROMPT = "Pulse Enter para continuar..."


class ConsoleIO(ABC):
    """
    Abstract base class for user interaction.

    ask_number() and ask_operator() raise InvalidInputError when the
    answer cannot be used; the caller decides what to do next.
    """

    def __init__(self, affirmative: Iterable[str] = ("s", "si", "y", "yes")):
        self.affirmative = frozenset(answer.lower() for answer in affirmative)

    @abstractmethod
    def write(self, text: str, newline: bool = False) -> None:
        """Print plain text."""
        pass

    @abstractmethod
    def write_error(self, text: str) -> None:
        pass

    @abstractmethod
    def read(self, prompt: str) -> str:
        """Show prompt and return one line of input."""
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    def pause(self) -> None:
        self.read(PAUSE_PROMPT)

    def show_message(self, message: str, pause: bool = False, clear: bool = False,
                     newline: bool = False) -> None:
        """
        Display a message.

        Args:
            message: Text to show
            pause: Wait for Enter first
            clear: Clear the terminal before and after the message
            newline: End the message with a line break
        """
        if pause:
            self.pause()
        if clear:
            self.clear()
        self.write(message, newline=newline)
        if clear:
            self.clear()

    def show_error(self, message: str, prefix: str = ERROR_PREFIX) -> None:
        self.write_error(f"{prefix}{message}")

    def ask_number(self, prompt: str = NUMBER_PROMPT) -> float:
        outcome = parse_number(self.read(prompt))
        if not outcome.success:
            raise outcome.error
        return outcome.value

    def ask_operator(self, prompt: str = OPERATOR_PROMPT) -> str:
        outcome = parse_operator(self.read(prompt))
        if not outcome.success:
            raise outcome.error
        return outcome.value

    def ask_option(self, prompt: str) -> bool:
        """Only an affirmative answer returns True; anything else is a no."""
        return self.read(prompt).strip().lower() in self.affirmative


class RichConsoleIO(ConsoleIO):
    """
    ConsoleIO on top of a rich Console.

    User supplied text is escaped, so brackets in a log line are
    printed as they are instead of being read as markup.
    """

    def __init__(self, console: Optional[Console] = None,
                 input_stream: Optional[TextIO] = None,
                 affirmative: Iterable[str] = ("s", "si", "y", "yes")):
        super().__init__(affirmative)
        self.console = console or Console()
        self.input_stream = input_stream

    def write(self, text: str, newline: bool = False) -> None:
        self.console.print(escape(text), end="\n" if newline else "")

    def write_error(self, text: str) -> None:
        self.console.print(f"[bold red]{escape(text)}[/bold red]")

    def read(self, prompt: str) -> str:
        answer = self.console.input(escape(prompt), stream=self.input_stream)
        return answer.rstrip("\r\n")

    def clear(self) -> None:
        self.console.clear()
