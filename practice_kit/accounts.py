"""
Account Management Module

Regular and savings accounts with deposit/withdraw rules. The variant
specific part of a withdrawal lives in a withdrawal policy held by the
account: regular accounts use an unrestricted policy, savings accounts allow
one withdrawal per calendar month.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional

from .config import get_config
from .errors import InsufficientBalanceError, InvalidAmountError, WithdrawalLimitExceededError, PracticeError
from .logging_config import get_logger, log_action
from .money import ZERO, exact_add, exact_subtract, format_amount, to_amount


logger = get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock"""
    return datetime.now(timezone.utc)


class AccountKind(Enum):
    """Account variants"""
    REGULAR = "regular"    # No withdrawal frequency restriction
    SAVINGS = "savings"    # One withdrawal per calendar month


class WithdrawalState(Enum):
    """Savings withdrawal states, evaluated against the clock on demand"""
    NEVER_WITHDRAWN = "never_withdrawn"
    WITHDRAWN_THIS_MONTH = "withdrawn_this_month"
    WITHDRAWN_PRIOR_MONTH = "withdrawn_prior_month"


def same_calendar_month(moment: datetime, now: datetime) -> bool:
    """
    Check whether two moments fall in the same (year, month)

    Aware timestamps are compared in the timezone of ``now``.
    """
    if moment.tzinfo is not None and now.tzinfo is not None:
        moment = moment.astimezone(now.tzinfo)
    return (moment.year, moment.month) == (now.year, now.month)


class WithdrawalPolicy(ABC):
    """Variant specific withdrawal rules"""

    kind: AccountKind

    @property
    def last_withdrawal_at(self) -> Optional[datetime]:
        return None

    @abstractmethod
    def authorize(self, now: datetime) -> None:
        """Raise if a withdrawal may not be attempted at ``now``"""

    @abstractmethod
    def record(self, now: datetime) -> None:
        """Called after a withdrawal succeeded"""

    def state(self, now: datetime) -> Optional[WithdrawalState]:
        return None

    def describe(self) -> str:
        return ""


class UnrestrictedWithdrawals(WithdrawalPolicy):
    """Regular account policy: any number of withdrawals"""

    kind = AccountKind.REGULAR

    def authorize(self, now: datetime) -> None:
        pass

    def record(self, now: datetime) -> None:
        pass


class MonthlyWithdrawalLimit(WithdrawalPolicy):
    """Savings account policy: at most one successful withdrawal per calendar month"""

    kind = AccountKind.SAVINGS

    def __init__(self, last_withdrawal_at: Optional[datetime] = None):
        self._last_withdrawal_at = last_withdrawal_at

    @property
    def last_withdrawal_at(self) -> Optional[datetime]:
        return self._last_withdrawal_at

    def authorize(self, now: datetime) -> None:
        if self._last_withdrawal_at is not None and same_calendar_month(self._last_withdrawal_at, now):
            raise WithdrawalLimitExceededError(
                "Savings withdrawal limit exceeded (one withdrawal per month)",
                last_withdrawal_at=self._last_withdrawal_at
            )

    def record(self, now: datetime) -> None:
        self._last_withdrawal_at = now

    def state(self, now: datetime) -> Optional[WithdrawalState]:
        if self._last_withdrawal_at is None:
            return WithdrawalState.NEVER_WITHDRAWN
        if same_calendar_month(self._last_withdrawal_at, now):
            return WithdrawalState.WITHDRAWN_THIS_MONTH
        return WithdrawalState.WITHDRAWN_PRIOR_MONTH

    def describe(self) -> str:
        if self._last_withdrawal_at is None:
            return ", Type: Savings, No withdrawals yet"
        return f", Type: Savings, Last withdrawal: {self._last_withdrawal_at.date().isoformat()}"


class Account:
    """
    Bank account holding a Decimal balance under a number and holder name

    The balance only changes through deposit() and withdraw(); a failed
    operation raises and leaves the account untouched.
    """

    def __init__(
        self,
        account_number: str,
        holder_name: str,
        initial_balance=ZERO,
        policy: Optional[WithdrawalPolicy] = None,
        clock: Optional[Clock] = None
    ):
        balance = to_amount(initial_balance)
        if balance < ZERO:
            raise InvalidAmountError("Initial balance cannot be negative", amount=initial_balance)

        self._account_number = account_number
        self._holder_name = holder_name
        self._balance = balance
        self._policy = policy or UnrestrictedWithdrawals()
        self._clock = clock or utc_now

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def holder_name(self) -> str:
        return self._holder_name

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def kind(self) -> AccountKind:
        return self._policy.kind

    @property
    def last_withdrawal_at(self) -> Optional[datetime]:
        """Time of the last successful withdrawal (savings accounts only)"""
        return self._policy.last_withdrawal_at

    @property
    def withdrawal_state(self) -> Optional[WithdrawalState]:
        """Savings withdrawal state as of now; None for regular accounts"""
        return self._policy.state(self._clock())

    def deposit(self, amount) -> Decimal:
        """
        Add money to the account

        Args:
            amount: Positive amount to deposit

        Returns:
            New balance

        Raises:
            InvalidAmountError: If amount is not a positive number or cannot be
                added to the balance without rounding
        """
        try:
            amt = self._positive_amount(amount, "Deposit amount must be positive")
            new_balance = exact_add(self._balance, amt)
        except PracticeError as e:
            self._log_rejection("deposit", e)
            raise

        self._balance = new_balance
        log_action(
            logger, "info", f"Deposited {amt} into account {self._account_number}",
            action="deposit", resource=self._account_number,
            extra={"amount": str(amt), "balance": str(self._balance)}
        )
        return self._balance

    def withdraw(self, amount) -> Decimal:
        """
        Take money out of the account

        The withdrawal policy is consulted before the amount is looked at, so
        a savings account past its monthly limit reports the limit even for
        an invalid amount.

        Args:
            amount: Positive amount not greater than the balance

        Returns:
            New balance

        Raises:
            WithdrawalLimitExceededError: If the policy forbids a withdrawal now
            InvalidAmountError: If amount is not a positive number
            InsufficientBalanceError: If amount exceeds the balance
        """
        now = self._clock()
        try:
            self._policy.authorize(now)
            amt = self._positive_amount(amount, "Withdrawal amount must be positive")
            if amt > self._balance:
                raise InsufficientBalanceError(
                    "Insufficient balance in account", amount=amt, balance=self._balance
                )
            new_balance = exact_subtract(self._balance, amt)
        except PracticeError as e:
            self._log_rejection("withdraw", e)
            raise

        self._balance = new_balance
        self._policy.record(now)
        log_action(
            logger, "info", f"Withdrew {amt} from account {self._account_number}",
            action="withdraw", resource=self._account_number,
            extra={"amount": str(amt), "balance": str(self._balance)}
        )
        return self._balance

    def describe(self) -> str:
        """Read-only summary of the account"""
        balance = format_amount(self._balance, get_config().display_precision)
        summary = f"Account No: {self._account_number}, Holder: {self._holder_name}, Balance: {balance}"
        return summary + self._policy.describe()

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"Account({self._account_number!r}, kind={self.kind.value}, balance={self._balance})"

    @staticmethod
    def _positive_amount(amount, message: str) -> Decimal:
        amt = to_amount(amount)
        if amt <= ZERO:
            raise InvalidAmountError(message, amount=amount)
        return amt

    def _log_rejection(self, action: str, error: PracticeError) -> None:
        log_action(
            logger, "warning", f"Rejected {action} on account {self._account_number}: {error}",
            action=action, resource=self._account_number,
            error=error
        )


def open_regular_account(account_number: str, holder_name: str, initial_balance=ZERO,
                         clock: Optional[Clock] = None) -> Account:
    """Create an account without withdrawal frequency restrictions"""
    return Account(account_number, holder_name, initial_balance,
                   policy=UnrestrictedWithdrawals(), clock=clock)


def open_savings_account(account_number: str, holder_name: str, initial_balance=ZERO,
                         clock: Optional[Clock] = None,
                         last_withdrawal_at: Optional[datetime] = None) -> Account:
    """Create a savings account limited to one withdrawal per calendar month"""
    return Account(account_number, holder_name, initial_balance,
                   policy=MonthlyWithdrawalLimit(last_withdrawal_at), clock=clock)
