"""
Error Hierarchy Module

Domain errors raised by the account model, the divide-numbers exercise and
the file reader. Every error is recoverable: the failed operation leaves
state untouched and the console layer may simply retry.
"""

from decimal import Decimal
from datetime import datetime
from enum import Enum


class PracticeError(Exception):
    """Base exception for all practice kit errors"""


class InvalidAmountError(PracticeError, ValueError):
    """Raised when an amount is zero, negative or not a number"""
    
    def __init__(self, message: str, amount=None):
        self.amount = amount
        super().__init__(message)


class InsufficientBalanceError(PracticeError):
    """Raised when a withdrawal exceeds the current balance"""
    
    def __init__(self, message: str, amount: Decimal, balance: Decimal):
        self.amount = amount
        self.balance = balance
        super().__init__(message)


class WithdrawalLimitExceededError(PracticeError):
    """Raised when a savings account already had its withdrawal this month"""
    
    def __init__(self, message: str, last_withdrawal_at: datetime):
        self.last_withdrawal_at = last_withdrawal_at
        super().__init__(message)


class MalformedInputError(PracticeError, ValueError):
    """Raised when input text cannot be turned into the expected numbers"""


class DivideByZeroError(PracticeError, ZeroDivisionError):
    """Raised when the divisor is zero"""


class FileUnavailableReason(Enum):
    """Why a file could not be read"""
    MISSING = "missing"                        # Path does not exist
    PERMISSION_DENIED = "permission_denied"    # No read access
    LOCKED = "locked"                          # Held by another process
    UNREADABLE = "unreadable"                  # Any other I/O or decoding failure


class FileUnavailableError(PracticeError):
    """Raised when a file cannot be read"""
    
    def __init__(self, message: str, path: str, reason: FileUnavailableReason):
        self.path = path
        self.reason = reason
        super().__init__(message)
    
    @property
    def is_locked(self) -> bool:
        """Locked files are retried after a back-off delay"""
        return self.reason == FileUnavailableReason.LOCKED
