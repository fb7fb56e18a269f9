"""
Calculator Module

The four arithmetic operations plus the helpers the menu needs
around them: parsing user text, dispatching on an operator symbol
and formatting results for the screen and the log file.

compute() and the parse_* helpers never raise for bad input.
They return an Outcome that the caller inspects.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .errors import CalculatorError, DivisionError, InvalidInputError

RECORD_LABEL = "**Calculo"
INVALID_NUMBER_MESSAGE = "'{text}' no es un número válido."
INVALID_OPERATOR_MESSAGE = "Operador '{text}' no válido. Use uno de: + - * /"
ZERO_DIVISION_MESSAGE = "No se puede dividir entre cero."


# === Operations ===

def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    Raises:
        DivisionError: If b is zero (0 / 0 included)
    """
    if b == 0:
        raise DivisionError(ZERO_DIVISION_MESSAGE)
    return a / b


OPERATIONS: Dict[str, Callable[[float, float], float]] = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
}


# === Outcome ===

@dataclass
class Outcome:
    """
    Result of a parse or compute step.

    Either holds a value (success) or the error that stopped it.
    """
    success: bool
    value: Any = None
    error: Optional[CalculatorError] = None

    def __str__(self) -> str:
        if self.success:
            return str(self.value)
        return str(self.error)

    @classmethod
    def ok(cls, value: Any) -> "Outcome":
        """Create a successful outcome."""
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: CalculatorError) -> "Outcome":
        """Create a failed outcome."""
        return cls(success=False, error=error)


# === Parsing ===

def parse_number(text: str) -> Outcome:
    """Parse a user supplied operand."""
    try:
        return Outcome.ok(float(text.strip()))
    except (ValueError, AttributeError):
        return Outcome.fail(InvalidInputError(INVALID_NUMBER_MESSAGE.format(text=text)))


def parse_operator(text: str) -> Outcome:
    """Check that text is one of the four supported symbols."""
    symbol = (text or "").strip()
    if symbol in OPERATIONS:
        return Outcome.ok(symbol)
    return Outcome.fail(InvalidInputError(INVALID_OPERATOR_MESSAGE.format(text=text)))


def compute(a: float, operator: str, b: float) -> Outcome:
    """
    Apply the operation selected by operator to a and b.

    Args:
        a: First operand
        operator: One of "+", "-", "*", "/"
        b: Second operand

    Returns:
        Outcome with the float result, or with the DivisionError /
        InvalidInputError that prevented it
    """
    operation = OPERATIONS.get(operator)
    if operation is None:
        return Outcome.fail(InvalidInputError(INVALID_OPERATOR_MESSAGE.format(text=operator)))

    try:
        return Outcome.ok(operation(a, b))
    except CalculatorError as e:
        return Outcome.fail(e)


# === Formatting ===

def round_number(value: float, decimals: int = 2) -> str:
    """Round a result for display, e.g. 7 -> '7.0', 2/3 -> '0.67'."""
    return str(round(float(value), decimals))


def format_record(op1: Any, operator: str, op2: Any, result: float,
                  index: Optional[int] = None) -> str:
    """
    Build the log line for a successful calculation.

    The batch calculation has no index; interactive ones are numbered.
    """
    label = RECORD_LABEL if index is None else f"{RECORD_LABEL} {index}"
    return f"{label}** ===>> {op1} {operator} {op2} = {result}"
