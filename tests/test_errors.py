"""
Test suite for errors module

Tests the error hierarchy and the context carried by each error.
"""

from decimal import Decimal
from datetime import datetime, timezone

from practice_kit.errors import (
    DivideByZeroError, FileUnavailableError, FileUnavailableReason,
    InsufficientBalanceError, InvalidAmountError, MalformedInputError,
    PracticeError, WithdrawalLimitExceededError
)


class TestErrorHierarchy:
    """Test exception inheritance chain"""
    
    def test_all_errors_are_practice_errors(self):
        """Test every domain error shares the base class"""
        errors = [
            InvalidAmountError("x"),
            InsufficientBalanceError("x", amount=Decimal('2'), balance=Decimal('1')),
            WithdrawalLimitExceededError("x", last_withdrawal_at=datetime.now(timezone.utc)),
            MalformedInputError("x"),
            DivideByZeroError("x"),
            FileUnavailableError("x", path="a.txt", reason=FileUnavailableReason.MISSING),
        ]
        for error in errors:
            assert isinstance(error, PracticeError)
    
    def test_builtin_compatibility(self):
        """Test errors can be caught as the matching builtin exception"""
        assert isinstance(InvalidAmountError("x"), ValueError)
        assert isinstance(MalformedInputError("x"), ValueError)
        assert isinstance(DivideByZeroError("x"), ZeroDivisionError)
        assert not isinstance(InsufficientBalanceError("x", Decimal('1'), Decimal('0')), ValueError)
    
    def test_exception_message(self):
        """Test message is preserved"""
        assert str(InvalidAmountError("Deposit amount must be positive")) == "Deposit amount must be positive"


class TestErrorContext:
    """Test attributes attached to errors"""
    
    def test_insufficient_balance_context(self):
        """Test amount and balance are kept"""
        error = InsufficientBalanceError("no", amount=Decimal('2000'), balance=Decimal('1300'))
        assert error.amount == Decimal('2000')
        assert error.balance == Decimal('1300')
    
    def test_invalid_amount_context(self):
        """Test the offending amount is kept"""
        assert InvalidAmountError("bad", amount=-5).amount == -5
        assert InvalidAmountError("bad").amount is None
    
    def test_file_unavailable_context(self):
        """Test path, reason and lock detection"""
        locked = FileUnavailableError("busy", path="data.txt", reason=FileUnavailableReason.LOCKED)
        missing = FileUnavailableError("gone", path="data.txt", reason=FileUnavailableReason.MISSING)
        
        assert locked.path == "data.txt"
        assert locked.is_locked
        assert not missing.is_locked
