"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class SecureBankingConfig(BaseSettings):
    """Secure banking core configuration"""

    model_config = SettingsConfigDict(
        env_prefix="SECURE_BANKING_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text

    # Driver configuration
    default_account_number: str = "123456"

    # PIN hashing (scrypt N, bounded by scrypt's 32 MiB default memory limit at r=8)
    pin_hash_cost: int = Field(default=16384, ge=2, le=16384)
    pin_salt_bytes: int = Field(default=16, ge=8)

    @field_validator("pin_hash_cost")
    @classmethod
    def validate_pin_hash_cost(cls, value: int) -> int:
        if value & (value - 1):
            raise ValueError("pin_hash_cost must be a power of two")
        return value

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return value


# Global configuration instance
config = SecureBankingConfig()


def get_config() -> SecureBankingConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> SecureBankingConfig:
    """Reload configuration from environment"""
    global config
    config = SecureBankingConfig()
    return config
