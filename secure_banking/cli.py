"""
Interactive Secured Account Session

Reads an initial balance, a PIN, one deposit and one withdrawal from the
console, runs them through a SecuredAccount and reports every outcome.
The first Account-level failure ends the session; PIN and limit denials are
reported and the session carries on.
"""

import sys
from typing import Callable, Optional

from .accounts import Account
from .amounts import format_amount, to_decimal
from .config import SecureBankingConfig, get_config
from .logging_config import setup_logging
from .notifications import ConsoleNotificationSink
from .results import TransactionResult
from .security import SecuredAccount

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]


class TransactionAborted(Exception):
    """An Account-level failure ended the session"""
    pass


def _report(result: TransactionResult, output: OutputFunc) -> None:
    if result.is_failure:
        raise TransactionAborted(result.message)
    if result.is_denied:
        output(result.message)


def run_session(input_func: InputFunc = input, output: OutputFunc = print,
                settings: Optional[SecureBankingConfig] = None) -> int:
    """
    Run one interactive session

    Returns:
        Process exit code: 0 on completion, 1 if the session was cut short
    """
    settings = settings or get_config()

    try:
        initial_balance = to_decimal(input_func("Enter initial balance: "))
        account = Account(settings.default_account_number, initial_balance)
        output(f"Bank Account Created: #{account.account_number}")

        account.add_observer(ConsoleNotificationSink(output))

        pin = input_func("Set your account PIN: ")
        secured = SecuredAccount(account, pin)

        deposit_amount = to_decimal(input_func("Enter deposit amount: "))
        deposit_pin = input_func("Enter PIN: ")
        _report(secured.secure_deposit(deposit_amount, deposit_pin), output)

        withdraw_amount = to_decimal(input_func("Enter withdrawal amount: "))
        withdraw_pin = input_func("Enter PIN: ")
        _report(secured.secure_withdraw(withdraw_amount, withdraw_pin), output)

        output(f"Final Balance: ${format_amount(secured.get_balance())}")
    except TransactionAborted as e:
        output(f"Transaction Error: {e}")
        return 1
    except ValueError as e:
        output(f"Unexpected Error: {e}")
        return 1
    except (EOFError, KeyboardInterrupt):
        output("")
        return 1

    return 0


def main() -> None:
    """Console entry point"""
    settings = get_config()
    setup_logging(settings.log_level, log_format=settings.log_format)
    sys.exit(run_session(settings=settings))


if __name__ == "__main__":
    main()
