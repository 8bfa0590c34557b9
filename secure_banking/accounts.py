"""
Account Module

A single bank account: balance, lifecycle state and the ordered list of
notification sinks. Deposits, withdrawals and closure report their outcome as
TransactionResult values and notify every sink after a successful mutation.
"""

from decimal import Decimal
from typing import List, Tuple
from enum import Enum
from abc import ABC, abstractmethod
from threading import RLock
import logging

from .amounts import AmountLike, to_decimal
from .notifications import (
    NotificationSink, ACCOUNT_CLOSED_MESSAGE, deposit_message, withdrawal_message
)
from .results import ResultStatus, TransactionResult

logger = logging.getLogger("secure_banking.accounts")


class AccountState(Enum):
    """Account lifecycle states"""
    ACTIVE = "active"  # Normal operation
    CLOSED = "closed"  # Permanently closed, no way back


class AccountInterface(ABC):
    """Capability exposed by anything that behaves like an account"""

    @abstractmethod
    def deposit(self, amount: AmountLike) -> TransactionResult:
        pass

    @abstractmethod
    def withdraw(self, amount: AmountLike) -> TransactionResult:
        pass

    @abstractmethod
    def get_balance(self) -> Decimal:
        pass

    @abstractmethod
    def close(self) -> TransactionResult:
        pass


class Account(AccountInterface):
    """
    Bank account with observer notifications

    The initial balance is taken as given. After every successful operation
    the balance is non-negative, and a closed account never changes balance
    again.
    """

    def __init__(self, account_number: str, initial_balance: AmountLike = Decimal('0')):
        self._account_number = account_number
        self._balance = to_decimal(initial_balance)
        self._state = AccountState.ACTIVE
        self._observers: List[NotificationSink] = []
        self._lock = RLock()

    def __repr__(self) -> str:
        return f"Account({self._account_number}, balance={self._balance}, state={self._state.value})"

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def state(self) -> AccountState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state == AccountState.ACTIVE

    @property
    def observers(self) -> Tuple[NotificationSink, ...]:
        return tuple(self._observers)

    def add_observer(self, observer: NotificationSink) -> None:
        """Attach a sink; the same sink may be attached more than once"""
        if not isinstance(observer, NotificationSink):
            raise TypeError(f"Observer must be a NotificationSink, got {type(observer).__name__}")
        with self._lock:
            self._observers.append(observer)

    def get_balance(self) -> Decimal:
        return self._balance

    def deposit(self, amount: AmountLike) -> TransactionResult:
        """
        Deposit money into the account

        Returns:
            OK with the new balance, INVALID_OPERATION if the account is
            closed, NEGATIVE_AMOUNT if amount < 0
        """
        amt = to_decimal(amount)
        with self._lock:
            if not self.is_active:
                return self._reject(ResultStatus.INVALID_OPERATION, "Cannot deposit to a closed account.")
            if amt < 0:
                return self._reject(ResultStatus.NEGATIVE_AMOUNT, "Deposit amount cannot be negative.")

            self._balance += amt
            message = deposit_message(amt)
            self._notify_observers(message)
            logger.debug(
                f"{self._account_number}: deposit {amt} -> {self._balance}",
                extra={'account_number': self._account_number, 'action': 'deposit'}
            )
            return TransactionResult.ok(message, self._balance)

    def withdraw(self, amount: AmountLike) -> TransactionResult:
        """
        Withdraw money from the account

        Returns:
            OK with the new balance, INVALID_OPERATION if the account is
            closed, NEGATIVE_AMOUNT if amount < 0, INSUFFICIENT_FUNDS if the
            amount exceeds the balance
        """
        amt = to_decimal(amount)
        with self._lock:
            if not self.is_active:
                return self._reject(ResultStatus.INVALID_OPERATION, "Cannot withdraw from a closed account.")
            if amt < 0:
                return self._reject(ResultStatus.NEGATIVE_AMOUNT, "Withdrawal amount cannot be negative.")
            if amt > self._balance:
                return self._reject(ResultStatus.INSUFFICIENT_FUNDS, "Insufficient funds.")

            self._balance -= amt
            message = withdrawal_message(amt)
            self._notify_observers(message)
            logger.debug(
                f"{self._account_number}: withdraw {amt} -> {self._balance}",
                extra={'account_number': self._account_number, 'action': 'withdraw'}
            )
            return TransactionResult.ok(message, self._balance)

    def close(self) -> TransactionResult:
        """
        Close the account

        The state changes only once, but every call notifies the sinks.
        """
        with self._lock:
            if self.is_active:
                self._state = AccountState.CLOSED
                logger.info(
                    f"{self._account_number}: account closed",
                    extra={'account_number': self._account_number, 'action': 'close'}
                )
            self._notify_observers(ACCOUNT_CLOSED_MESSAGE)
            return TransactionResult.ok(ACCOUNT_CLOSED_MESSAGE, self._balance)

    def _notify_observers(self, message: str) -> None:
        for observer in self._observers:
            observer.notify(message)

    def _reject(self, status: ResultStatus, message: str) -> TransactionResult:
        logger.info(
            f"{self._account_number}: {message}",
            extra={
                'account_number': self._account_number,
                'action': status.code,
                'status': status.category.value
            }
        )
        return TransactionResult.failure(status, message, self._balance)
