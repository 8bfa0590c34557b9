"""
Transaction Result Module

Every account operation reports its outcome as a TransactionResult instead of
raising. Callers can match on the status, or call raise_for_status() to get
the matching exception from the errors module.
"""

from decimal import Decimal
from dataclasses import dataclass
from typing import Dict, Type
from enum import Enum

from .errors import (
    BankingError, NegativeAmount, InsufficientFunds, InvalidOperation, Denied, LimitExceeded
)


class ResultCategory(Enum):
    """Broad outcome classes"""
    OK = "ok"
    FAILURE = "failure"  # Account-level state violation
    DENIAL = "denial"    # Secured-account policy rejection


class ResultStatus(Enum):
    """Outcome of a single operation"""
    OK = ("ok", ResultCategory.OK)
    NEGATIVE_AMOUNT = ("negative_amount", ResultCategory.FAILURE)
    INSUFFICIENT_FUNDS = ("insufficient_funds", ResultCategory.FAILURE)
    INVALID_OPERATION = ("invalid_operation", ResultCategory.FAILURE)
    DENIED = ("denied", ResultCategory.DENIAL)
    LIMIT_EXCEEDED = ("limit_exceeded", ResultCategory.DENIAL)

    def __init__(self, code: str, category: ResultCategory):
        self.code = code
        self.category = category


_STATUS_ERRORS: Dict[ResultStatus, Type[BankingError]] = {
    ResultStatus.NEGATIVE_AMOUNT: NegativeAmount,
    ResultStatus.INSUFFICIENT_FUNDS: InsufficientFunds,
    ResultStatus.INVALID_OPERATION: InvalidOperation,
    ResultStatus.DENIED: Denied,
    ResultStatus.LIMIT_EXCEEDED: LimitExceeded,
}


@dataclass(frozen=True)
class TransactionResult:
    """
    Immutable outcome of a deposit, withdrawal or close.

    balance is the account balance observed right after the attempt, so a
    rejected operation reports the unchanged balance.
    """
    status: ResultStatus
    message: str
    balance: Decimal

    @classmethod
    def ok(cls, message: str, balance: Decimal) -> 'TransactionResult':
        return cls(ResultStatus.OK, message, balance)

    @classmethod
    def failure(cls, status: ResultStatus, message: str, balance: Decimal) -> 'TransactionResult':
        """Build an Account-level failure result"""
        if status.category != ResultCategory.FAILURE:
            raise ValueError(f"{status.code} is not an account failure status")
        return cls(status, message, balance)

    @classmethod
    def denied(cls, status: ResultStatus, message: str, balance: Decimal) -> 'TransactionResult':
        """Build a policy denial result"""
        if status.category != ResultCategory.DENIAL:
            raise ValueError(f"{status.code} is not a denial status")
        return cls(status, message, balance)

    @property
    def is_ok(self) -> bool:
        return self.status.category == ResultCategory.OK

    @property
    def is_failure(self) -> bool:
        """True for Account-level state violations"""
        return self.status.category == ResultCategory.FAILURE

    @property
    def is_denied(self) -> bool:
        """True for PIN mismatches and limit breaches"""
        return self.status.category == ResultCategory.DENIAL

    def raise_for_status(self) -> None:
        """Raise the exception matching a non-OK status"""
        error_class = _STATUS_ERRORS.get(self.status)
        if error_class is not None:
            raise error_class(self.message)

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for logging"""
        return {
            'status': self.status.code,
            'category': self.status.category.value,
            'message': self.message,
            'balance': str(self.balance)
        }
