"""
Tests for environment driven configuration
"""

import pytest
from pydantic import ValidationError

from secure_banking import config as config_module
from secure_banking.config import SecureBankingConfig, get_config, reload_config


class TestSecureBankingConfig:
    """Test defaults and environment overrides"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SECURE_BANKING_PIN_HASH_COST", raising=False)
        settings = SecureBankingConfig(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.default_account_number == "123456"
        assert settings.pin_hash_cost == 16384
        assert settings.pin_salt_bytes == 16

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("SECURE_BANKING_DEFAULT_ACCOUNT_NUMBER", "999000")
        monkeypatch.setenv("SECURE_BANKING_LOG_FORMAT", "TEXT")

        settings = SecureBankingConfig(_env_file=None)

        assert settings.default_account_number == "999000"
        assert settings.log_format == "text"

    def test_hash_cost_must_be_power_of_two(self, monkeypatch):
        monkeypatch.setenv("SECURE_BANKING_PIN_HASH_COST", "1000")
        with pytest.raises(ValidationError):
            SecureBankingConfig(_env_file=None)

    @pytest.mark.parametrize("cost", ["32768", "1048576"])
    def test_hash_cost_capped_at_scrypt_memory_limit(self, monkeypatch, cost):
        """Test work factors that would exceed scrypt's memory limit are refused"""
        monkeypatch.setenv("SECURE_BANKING_PIN_HASH_COST", cost)
        with pytest.raises(ValidationError):
            SecureBankingConfig(_env_file=None)

    def test_hash_cost_upper_bound_accepted(self, monkeypatch):
        monkeypatch.setenv("SECURE_BANKING_PIN_HASH_COST", "16384")
        assert SecureBankingConfig(_env_file=None).pin_hash_cost == 16384

    def test_unknown_log_format_rejected(self):
        with pytest.raises(ValidationError):
            SecureBankingConfig(_env_file=None, log_format="xml")

    def test_reload_replaces_global(self, monkeypatch):
        """Test reload_config picks up new environment values"""
        monkeypatch.setenv("SECURE_BANKING_LOG_LEVEL", "DEBUG")

        reloaded = reload_config()

        assert reloaded.log_level == "DEBUG"
        assert get_config() is reloaded
        assert config_module.config is reloaded
