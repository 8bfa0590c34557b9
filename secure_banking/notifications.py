"""
Notification Sink Module

Accounts fan out human readable event messages to every attached sink.
Sinks are plain side-effect consumers; output concerns stay outside the
account itself.
"""

from decimal import Decimal
from typing import Callable, List, Optional
from abc import ABC, abstractmethod
import logging

from .amounts import format_amount

ACCOUNT_CLOSED_MESSAGE = "Account closed."


def deposit_message(amount: Decimal) -> str:
    return f"Deposited ${format_amount(amount)}"


def withdrawal_message(amount: Decimal) -> str:
    return f"Withdrew ${format_amount(amount)}"


class NotificationSink(ABC):
    """Abstract receiver of account event notifications"""

    @abstractmethod
    def notify(self, message: str) -> None:
        """Receive one event message"""
        pass


class LogNotificationSink(NotificationSink):
    """Writes every notification to a logger at INFO level"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("secure_banking.notifications")

    def notify(self, message: str) -> None:
        self.logger.info(message, extra={'action': 'notify'})


class ConsoleNotificationSink(NotificationSink):
    """Console transaction logger used by the interactive driver"""

    def __init__(self, output: Callable[[str], None] = print, prefix: str = "[Log]: "):
        self.output = output
        self.prefix = prefix

    def notify(self, message: str) -> None:
        self.output(f"{self.prefix}{message}")


class InMemoryNotificationSink(NotificationSink):
    """Keeps notifications in arrival order"""

    def __init__(self):
        self._messages: List[str] = []

    @property
    def messages(self) -> List[str]:
        return list(self._messages)

    def notify(self, message: str) -> None:
        self._messages.append(message)

    def clear(self) -> None:
        self._messages.clear()

    def __len__(self) -> int:
        return len(self._messages)
