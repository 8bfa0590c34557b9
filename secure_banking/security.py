"""
Secured Account Module

Wraps an account with PIN authorization and a per-call withdrawal ceiling.
The wrapper holds no balance of its own; every allowed operation is delegated
to the wrapped account and every balance query reads it live.
"""

from decimal import Decimal
import hashlib
import hmac
import logging
import secrets

from .accounts import AccountInterface
from .amounts import AmountLike, to_decimal
from .config import get_config
from .logging_config import log_action
from .results import ResultStatus, TransactionResult

logger = logging.getLogger("secure_banking.security")

WITHDRAWAL_LIMIT = Decimal("500")

INVALID_PIN_MESSAGE = "Invalid PIN. Transaction denied."
LIMIT_EXCEEDED_MESSAGE = "Withdrawal limit exceeded. Max: $500"


class SecuredAccount:
    """
    PIN protected view over an account

    A wrong PIN or an over-limit withdrawal is reported as a denial result and
    never reaches the wrapped account. Account-level failures from the wrapped
    account are returned unchanged.
    """

    def __init__(self, account: AccountInterface, pin: str):
        if not pin:
            raise ValueError("PIN must be a non-empty string")

        settings = get_config()
        self._account = account
        self._hash_cost = settings.pin_hash_cost
        self._pin_salt = secrets.token_hex(settings.pin_salt_bytes)
        self._pin_hash = self._hash_pin(pin)

    def __repr__(self) -> str:
        return f"SecuredAccount({self._account!r})"

    @property
    def account_number(self) -> str:
        return getattr(self._account, 'account_number', '')

    def get_balance(self) -> Decimal:
        return self._account.get_balance()

    def secure_deposit(self, amount: AmountLike, input_pin: str) -> TransactionResult:
        """Deposit through the wrapped account if the PIN matches"""
        if not self._validate_pin(input_pin):
            return self._deny(ResultStatus.DENIED, INVALID_PIN_MESSAGE, "deposit")
        return self._account.deposit(amount)

    def secure_withdraw(self, amount: AmountLike, input_pin: str) -> TransactionResult:
        """
        Withdraw through the wrapped account

        The PIN is checked first, then the ceiling of WITHDRAWAL_LIMIT per
        call (the limit itself is allowed), then the wrapped account applies
        its own rules.
        """
        if not self._validate_pin(input_pin):
            return self._deny(ResultStatus.DENIED, INVALID_PIN_MESSAGE, "withdraw")
        if to_decimal(amount) > WITHDRAWAL_LIMIT:
            return self._deny(ResultStatus.LIMIT_EXCEEDED, LIMIT_EXCEEDED_MESSAGE, "withdraw")
        return self._account.withdraw(amount)

    def _hash_pin(self, pin: str) -> str:
        """Hash PIN with salt using scrypt"""
        return hashlib.scrypt(
            pin.encode(),
            salt=self._pin_salt.encode(),
            n=self._hash_cost, r=8, p=1
        ).hex()

    def _validate_pin(self, input_pin: str) -> bool:
        if not isinstance(input_pin, str):
            return False
        return hmac.compare_digest(self._hash_pin(input_pin), self._pin_hash)

    def _deny(self, status: ResultStatus, message: str, action: str) -> TransactionResult:
        log_action(
            logger, "warning", message,
            account_number=self.account_number,
            action=action,
            status=status.code
        )
        return TransactionResult.denied(status, message, self.get_balance())
