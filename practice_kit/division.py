"""
Divide Numbers Module

Reads two numbers from the first two lines of a file and divides the first
by the second.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
import math

from .config import get_config
from .errors import DivideByZeroError, MalformedInputError
from .file_reader import read_lines
from .logging_config import get_logger, log_action


logger = get_logger(__name__)


@dataclass(frozen=True)
class DivisionResult:
    """Operands and quotient of a successful division"""
    dividend: float
    divisor: float
    quotient: float


def parse_number(text: str) -> float:
    """
    Parse one operand
    
    Raises:
        MalformedInputError: If the text is not a finite number
    """
    try:
        value = float(text.strip())
    except ValueError:
        raise MalformedInputError(f"'{text.strip()}' is not a number") from None
    if not math.isfinite(value):
        raise MalformedInputError(f"'{text.strip()}' is not a finite number")
    return value


def parse_operands(lines: Sequence[str], min_lines: Optional[int] = None) -> Tuple[float, float]:
    """
    Take the dividend and divisor from the first two lines
    
    Raises:
        MalformedInputError: If there are too few lines or a line is not a number
    """
    if min_lines is None:
        min_lines = get_config().min_operand_lines
    if len(lines) < max(min_lines, 2):
        raise MalformedInputError("The file must contain at least two numbers")
    return parse_number(lines[0]), parse_number(lines[1])


def divide(dividend: float, divisor: float) -> float:
    """
    Divide two numbers
    
    Raises:
        DivideByZeroError: If divisor is zero
    """
    if divisor == 0:
        raise DivideByZeroError("Division by zero is not possible")
    return dividend / divisor


def divide_file(path) -> DivisionResult:
    """
    Read two numbers from a file and divide them
    
    Raises:
        FileUnavailableError: If the file cannot be read
        MalformedInputError: If the file does not hold two numbers
        DivideByZeroError: If the second number is zero
    """
    dividend, divisor = parse_operands(read_lines(path))
    quotient = divide(dividend, divisor)
    log_action(
        logger, "info", f"Divided {dividend} by {divisor}",
        action="divide", resource=str(path), extra={"quotient": quotient}
    )
    return DivisionResult(dividend=dividend, divisor=divisor, quotient=quotient)
