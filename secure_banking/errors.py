"""
Banking Error Taxonomy

Account-level state violations and secured-account policy denials are kept in
separate branches so callers can tell "wrong PIN" apart from "insufficient
funds" apart from "account closed".
"""


class BankingError(Exception):
    """Base class for all banking errors"""
    pass


class AccountError(BankingError):
    """Account-level state violation"""
    pass


class NegativeAmount(AccountError):
    """Raised when an amount below zero is deposited or withdrawn"""
    pass


class InsufficientFunds(AccountError):
    """Raised when a withdrawal exceeds the current balance"""
    pass


class InvalidOperation(AccountError):
    """Raised when a closed account is asked to move money"""
    pass


class PolicyDenial(BankingError):
    """Secured-account policy rejection"""
    pass


class Denied(PolicyDenial):
    """Raised when the supplied PIN does not match"""
    pass


class LimitExceeded(PolicyDenial):
    """Raised when a secured withdrawal is above the per-call ceiling"""
    pass


class InvalidAmountFormat(BankingError, ValueError):
    """Raised when an amount cannot be interpreted as a decimal number"""
    pass
