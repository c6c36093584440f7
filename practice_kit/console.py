"""
Console Exercises Module

Interactive loops for the three exercises. Each file based exercise keeps
asking for a path until the action succeeds; a locked file is retried after
a fixed delay. Input, output and sleeping are injectable so the loops can be
driven from tests.
"""

from decimal import Decimal
from typing import Callable, Optional, TypeVar
import time

from .accounts import open_regular_account, open_savings_account
from .config import get_config
from .division import DivisionResult, divide_file
from .errors import (
    DivideByZeroError, FileUnavailableError, FileUnavailableReason,
    InsufficientBalanceError, InvalidAmountError, MalformedInputError,
    PracticeError, WithdrawalLimitExceededError
)
from .file_reader import read_lines
from .logging_config import get_logger


logger = get_logger(__name__)

T = TypeVar("T")

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]
SleepFn = Callable[[float], None]

FILE_MESSAGES = {
    FileUnavailableReason.MISSING: "Error: File not found. Please check the path and try again.",
    FileUnavailableReason.PERMISSION_DENIED: "Error: You do not have permission to read this file. Please choose another file.",
    FileUnavailableReason.LOCKED: "Error: The file is locked by another program. Try again in a few seconds or choose another file.",
}


def error_message(error: PracticeError) -> str:
    """Text shown to the user for a failed attempt"""
    if isinstance(error, FileUnavailableError):
        default = f"Error: {error}. Please check the file and try again."
        return FILE_MESSAGES.get(error.reason, default)
    if isinstance(error, MalformedInputError):
        return f"Error: {error}. Please make sure the file contains two numbers."
    if isinstance(error, DivideByZeroError):
        return "Error: Division by zero is not possible. Please change the second number."
    return f"Error: {error}"


def retry_until_success(
    prompt: str,
    action: Callable[[str], T],
    input_fn: InputFn = input,
    output: OutputFn = print,
    sleep: SleepFn = time.sleep,
    retry_delay: Optional[float] = None
) -> Optional[T]:
    """
    Ask for a path and run ``action`` on it until it succeeds

    Args:
        prompt: Text shown when asking for the path
        action: Callable receiving the entered path
        input_fn: Reads one line of user input
        output: Writes one line of output
        sleep: Blocks for the given number of seconds
        retry_delay: Wait after a locked file; defaults to configuration

    Returns:
        Result of the first successful call, or None when input runs out
    """
    if retry_delay is None:
        retry_delay = get_config().locked_file_retry_delay_seconds

    attempt = 0
    while True:
        try:
            path = input_fn(prompt)
        except EOFError:
            logger.info("Input closed after %d attempts", attempt)
            return None

        attempt += 1
        try:
            return action(path)
        except PracticeError as e:
            output(error_message(e))
            if isinstance(e, FileUnavailableError) and e.is_locked:
                logger.info("File %s is locked, waiting %.1f seconds", e.path, retry_delay)
                sleep(retry_delay)


def run_divide_numbers(input_fn: InputFn = input, output: OutputFn = print,
                       sleep: SleepFn = time.sleep) -> Optional[DivisionResult]:
    """Divide the two numbers of a user supplied file"""
    result = retry_until_success(
        "Enter the path of the file with the numbers: ", divide_file,
        input_fn=input_fn, output=output, sleep=sleep
    )
    if result is not None:
        output(f"Result of dividing {result.dividend} by {result.divisor} = {result.quotient}")
    return result


def run_read_file(input_fn: InputFn = input, output: OutputFn = print,
                  sleep: SleepFn = time.sleep) -> Optional[list]:
    """Print the contents of a user supplied file"""
    lines = retry_until_success(
        "Enter the file path: ", read_lines,
        input_fn=input_fn, output=output, sleep=sleep
    )
    if lines is not None:
        output("File contents:")
        for line in lines:
            output(line)
    return lines


def run_bank_demo(output: OutputFn = print) -> None:
    """Walk through deposits, withdrawals and the expected failures"""
    regular = open_regular_account("1234567890", "Ivan Ivanov", Decimal("1000"))
    savings = open_savings_account("9876543210", "Maria Petrova", Decimal("5000"))

    def show() -> None:
        output(regular.describe())
        output(savings.describe())

    show()

    regular.deposit(Decimal("500"))
    output(f"Deposited 500 into {regular.account_number}. New balance: {regular.balance}")
    savings.deposit(Decimal("1000"))
    output(f"Deposited 1000 into {savings.account_number}. New balance: {savings.balance}")
    show()

    regular.withdraw(Decimal("200"))
    output(f"Withdrew 200 from {regular.account_number}. New balance: {regular.balance}")
    savings.withdraw(Decimal("1000"))
    output(f"Withdrew 1000 from {savings.account_number}. New balance: {savings.balance}")
    show()

    # Second savings withdrawal in the same month
    try:
        savings.withdraw(Decimal("500"))
    except WithdrawalLimitExceededError as e:
        output(f"Error: {e}")

    # More than the balance
    try:
        regular.withdraw(Decimal("2000"))
    except InsufficientBalanceError as e:
        output(f"Error: {e}")

    # Negative amount
    try:
        regular.deposit(Decimal("-100"))
    except InvalidAmountError as e:
        output(f"Error: {e}")
