"""
Shared fixtures for the secure banking test suite
"""

import pytest

from secure_banking import config as config_module


@pytest.fixture(autouse=True)
def fast_pin_hashing(monkeypatch):
    """Use a cheap scrypt work factor so PIN checks stay fast"""
    monkeypatch.setenv("SECURE_BANKING_PIN_HASH_COST", "1024")
    config_module.reload_config()
    yield
    monkeypatch.undo()
    config_module.reload_config()
