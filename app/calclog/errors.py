"""
Errors Module

Exceptions raised by the calculator and its input parsers.
They are caught by the menu, shown to the user and written to
the log file as plain text.
"""


class CalculatorError(Exception):
    """Base exception for calculation errors."""
    pass


class DivisionError(CalculatorError):
    """Raised when dividing by zero."""
    pass


class InvalidInputError(CalculatorError):
    """Raised when a number or operator cannot be parsed."""
    pass
