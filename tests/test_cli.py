"""
Tests for the interactive session driver
"""

import pytest

from secure_banking import cli
from secure_banking.cli import run_session
from secure_banking.config import SecureBankingConfig


class ScriptedConsole:
    """Feeds canned answers to prompts and captures output lines"""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.lines = []

    def input(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def output(self, line):
        self.lines.append(line)


def run(answers, settings=None):
    console = ScriptedConsole(answers)
    code = run_session(console.input, console.output, settings)
    return code, console


class TestRunSession:
    """Test end-to-end sessions"""

    def test_successful_session(self):
        """Test deposit and withdrawal with the right PIN"""
        code, console = run(["100.0", "1234", "50", "1234", "150", "1234"])

        assert code == 0
        assert console.prompts == [
            "Enter initial balance: ",
            "Set your account PIN: ",
            "Enter deposit amount: ",
            "Enter PIN: ",
            "Enter withdrawal amount: ",
            "Enter PIN: ",
        ]
        assert console.lines == [
            "Bank Account Created: #123456",
            "[Log]: Deposited $50.0",
            "[Log]: Withdrew $150.0",
            "Final Balance: $0.0",
        ]

    def test_over_limit_withdrawal_reported(self):
        """Test a limit denial is printed and the session completes"""
        code, console = run(["100.0", "1234", "50", "1234", "700", "1234"])

        assert code == 0
        assert console.lines == [
            "Bank Account Created: #123456",
            "[Log]: Deposited $50.0",
            "Withdrawal limit exceeded. Max: $500",
            "Final Balance: $150.0",
        ]

    def test_wrong_pin_reported(self):
        """Test PIN denials are printed for both operations"""
        code, console = run(["100", "1234", "50", "0000", "20", "9999"])

        assert code == 0
        assert console.lines == [
            "Bank Account Created: #123456",
            "Invalid PIN. Transaction denied.",
            "Invalid PIN. Transaction denied.",
            "Final Balance: $100.0",
        ]

    def test_negative_deposit_ends_session(self):
        """Test an Account-level failure stops the session"""
        code, console = run(["100", "1234", "-5", "1234", "20", "1234"])

        assert code == 1
        assert console.lines == [
            "Bank Account Created: #123456",
            "Transaction Error: Deposit amount cannot be negative.",
        ]
        assert "Enter withdrawal amount: " not in console.prompts

    def test_insufficient_funds_ends_session(self):
        code, console = run(["10", "1234", "0", "1234", "20", "1234"])

        assert code == 1
        assert console.lines[-1] == "Transaction Error: Insufficient funds."

    def test_malformed_amount(self):
        """Test non-numeric input is reported as an unexpected error"""
        code, console = run(["ten dollars"])

        assert code == 1
        assert console.lines[0].startswith("Unexpected Error: ")

    def test_out_of_range_amount(self):
        """Test an amount too large to hold is reported, not raised"""
        code, console = run(["100", "1234", "1e5000000", "1234", "1", "1234"])

        assert code == 1
        assert console.lines == [
            "Bank Account Created: #123456",
            "Unexpected Error: Amount '1e5000000' is out of range",
        ]

    def test_spaced_digits_rejected(self):
        """Test digits split by a space are not silently joined"""
        code, console = run(["5 0"])

        assert code == 1
        assert console.lines == ["Unexpected Error: Cannot convert '5 0' to Decimal"]

    def test_empty_pin(self):
        code, console = run(["10", ""])

        assert code == 1
        assert console.lines[-1] == "Unexpected Error: PIN must be a non-empty string"

    def test_end_of_input(self):
        """Test running out of input ends the session quietly"""
        code, console = run(["10"])

        assert code == 1
        assert console.lines[-1] == ""

    def test_account_number_from_settings(self):
        settings = SecureBankingConfig(_env_file=None, default_account_number="777", pin_hash_cost=1024)
        code, console = run(["1", "1", "1", "1", "1", "1"], settings)

        assert code == 0
        assert console.lines[0] == "Bank Account Created: #777"


class TestMain:
    """Test the console entry point"""

    def test_main_exits_with_session_code(self, monkeypatch):
        calls = {}

        def fake_setup(level, log_format="json"):
            calls["setup"] = (level, log_format)

        monkeypatch.setattr(cli, "setup_logging", fake_setup)
        monkeypatch.setattr(cli, "run_session", lambda settings: 0)

        with pytest.raises(SystemExit) as exc_info:
            cli.main()

        assert exc_info.value.code == 0
        assert calls["setup"] == ("INFO", "json")
