"""
Menu Module

The calculator's controller. It decides what to do with the
command line arguments, prepares the log file for the run and
then runs the interactive calculation loop.

Startup arguments:
    []                                  use the default log directory
    [path]                              use path as the log directory
    [path, operand1, operator, operand2] one calculation, then the menu

Any other number of arguments prints an error and exits with status 0.
"""

import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .calculator import (
    OPERATIONS,
    Outcome,
    compute,
    format_record,
    parse_number,
    parse_operator,
    round_number,
)
from .config import Config, load_config
from .console import ConsoleIO, RichConsoleIO
from .errors import CalculatorError
from .files import FileStore, LocalFileStore, new_log_name
from .logging_config import get_logger, setup_logging

logger = get_logger("menu")

TITLE = "*** Calculadora ***"
FIRST_PROMPT = "¿Desea realizar cálculos? s/n > "
NEXT_PROMPT = "¿Desea seguir realizando cálculos? s/n > "
DIRECTORY_CREATED = "Ruta {path} creada"
NO_LOGS = "No existen ficheros de Log"
INVALID_ARGUMENTS = "Número de argumentos no válido. Saliendo del programa."


@dataclass(frozen=True)
class LogSession:
    """The log file every record of this run is appended to."""
    directory: str
    file_name: str


class MenuController:
    """
    Wires the console, the file store and the calculator together.

    start() handles the startup arguments and hands a LogSession to
    run_loop(), which keeps asking for calculations until the user
    says no.
    """

    def __init__(self, console: ConsoleIO, files: FileStore, args: Sequence[str],
                 config: Optional[Config] = None):
        self.console = console
        self.files = files
        self.args = list(args)
        self.config = config or load_config()

    def start(self) -> int:
        """
        Run the whole program.

        Returns:
            Number of calculations logged by the interactive loop
        """
        count = len(self.args)
        logger.debug(f"Starting with {count} argument(s)")

        if count == 0:
            session = self._open_directory(self.config.default_directory)
        elif count == 1:
            session = self._open_directory(self.args[0])
        elif count == 4:
            session = self._run_batch(*self.args)
        else:
            self.console.show_error(INVALID_ARGUMENTS)
            logger.info(f"Invalid argument count: {count}")
            sys.exit(0)

        if self.config.pause_enabled:
            self.console.pause()
        if self.config.clear_enabled:
            self.console.clear()

        return self.run_loop(session)

    # === Startup ===

    def _ensure_directory(self, directory: str) -> None:
        if not self.files.directory_exists(directory):
            self.files.create_directory(directory)
            self.console.show_message(DIRECTORY_CREATED.format(path=directory), newline=True)

    def _new_log_file(self, directory: str) -> str:
        return self.files.create_file(directory, new_log_name(self.config.log_prefix))

    def _open_directory(self, directory: str) -> LogSession:
        """
        Prepare the log directory and pick the file for this run.

        An empty directory gets a new log file. Otherwise the newest
        log is shown line by line and the run keeps appending to it.
        """
        self._ensure_directory(directory)

        recent = None
        if not self.files.is_directory_empty(directory):
            recent = self.files.most_recent_file(directory)

        if recent is None:
            self.console.show_message(NO_LOGS, newline=True)
            return LogSession(directory, self._new_log_file(directory))

        logger.info(f"Resuming log file {recent}")
        for line in self.files.read_file_lines(directory, recent):
            self.console.show_message(line, newline=True)
        return LogSession(directory, recent)

    def _run_batch(self, directory: str, op1: str, operator: str, op2: str) -> LogSession:
        """Perform the calculation given on the command line."""
        self._ensure_directory(directory)
        session = LogSession(directory, self._new_log_file(directory))

        outcome = self._batch_outcome(op1, operator, op2)
        if outcome.success:
            self.console.show_message(round_number(outcome.value, self.config.decimals), newline=True)
            self._record(session, format_record(op1, operator, op2, outcome.value))
        else:
            self._record_error(session, outcome.error)
        return session

    @staticmethod
    def _batch_outcome(op1: str, operator: str, op2: str) -> Outcome:
        parsed = [parse_number(op1), parse_operator(operator), parse_number(op2)]
        for outcome in parsed:
            if not outcome.success:
                return outcome
        num1, symbol, num2 = (outcome.value for outcome in parsed)
        return compute(num1, symbol, num2)

    # === Interactive loop ===

    def run_loop(self, session: LogSession) -> int:
        """
        Ask for calculations until the user declines.

        An operator the calculator does not know skips straight to the
        next question without logging anything.

        Returns:
            Number of calculations logged
        """
        counter = 0
        self.console.show_message(TITLE, newline=True)
        option = self.console.ask_option(FIRST_PROMPT)

        while option:
            try:
                num1 = self.console.ask_number()
                operator = self.console.ask_operator()
                num2 = self.console.ask_number()
            except CalculatorError as e:
                self._record_error(session, e)
                option = self.console.ask_option(NEXT_PROMPT)
                continue

            if operator not in OPERATIONS:
                logger.debug(f"Skipping unknown operator {operator!r}")
                option = self.console.ask_option(NEXT_PROMPT)
                continue

            outcome = compute(num1, operator, num2)
            if outcome.success:
                self.console.show_message(round_number(outcome.value, self.config.decimals), newline=True)
                self._record(session, format_record(num1, operator, num2, outcome.value, index=counter))
                counter += 1
            else:
                self._record_error(session, outcome.error)

            option = self.console.ask_option(NEXT_PROMPT)

        logger.info(f"Menu finished after {counter} calculation(s)")
        return counter

    # === Log records ===

    def _record(self, session: LogSession, line: str) -> None:
        self.files.append_line(session.directory, session.file_name, line)

    def _record_error(self, session: LogSession, error: CalculatorError) -> None:
        message = str(error)
        self.console.show_error(message)
        logger.info(f"{type(error).__name__}: {message}")
        self._record(session, message)


# === Command Line Interface ===

def main(argv: Optional[List[str]] = None) -> int:
    """
    Command line entry point.

    Usage:
        python -m calclog [path [operand1 operator operand2]]

    Returns 1 only when the configuration is invalid.
    """
    args = sys.argv[1:] if argv is None else argv

    try:
        config = load_config()
    except ValueError as e:
        RichConsoleIO().show_error(str(e))
        return 1

    setup_logging(
        level=config.log_level,
        log_file=config.diagnostics_file,
        json_format=config.json_logs,
    )

    console = RichConsoleIO(affirmative=config.affirmative)
    files = LocalFileStore(log_prefix=config.log_prefix)
    menu = MenuController(console, files, args, config)

    try:
        menu.start()
    except (KeyboardInterrupt, EOFError):
        console.show_message("", newline=True)
        logger.info("Interrupted by user")
    return 0


if __name__ == "__main__":
    sys.exit(main())
