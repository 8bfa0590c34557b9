"""
Secure Banking Core

A single bank account with observer-based transaction notifications and a
PIN-protected wrapper that enforces a per-withdrawal ceiling.
"""

from .accounts import Account, AccountInterface, AccountState
from .notifications import (
    NotificationSink, LogNotificationSink, ConsoleNotificationSink, InMemoryNotificationSink
)
from .results import ResultStatus, TransactionResult
from .security import SecuredAccount, WITHDRAWAL_LIMIT

__version__ = "1.0.0"

__all__ = [
    "Account",
    "AccountInterface",
    "AccountState",
    "NotificationSink",
    "LogNotificationSink",
    "ConsoleNotificationSink",
    "InMemoryNotificationSink",
    "ResultStatus",
    "TransactionResult",
    "SecuredAccount",
    "WITHDRAWAL_LIMIT",
]
