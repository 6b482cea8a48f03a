import pytest
import os
import sys

# Add project root to path to ensure imports work correctly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from optional_value.utils.config_manager import config


class DefaultProducer:
    """Callable default-value producer that records each invocation."""

    def __init__(self, value="Default Value"):
        self.value = value
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.value


@pytest.fixture
def default_producer():
    """Return a side-effecting producer of the string 'Default Value'."""
    return DefaultProducer()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all OPTIONAL_VALUE_* variables from the environment."""
    for name in list(os.environ):
        if name.startswith("OPTIONAL_VALUE_"):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def logging_config(monkeypatch, tmp_path):
    """Point the global logging configuration at a temporary directory."""
    monkeypatch.setattr(config.logging, "log_dir", str(tmp_path / "logs"))
    monkeypatch.setattr(config.logging, "enable_file_logging", False)
    monkeypatch.setattr(config.logging, "console_logging", True)
    monkeypatch.setattr(config.logging, "log_level", "WARNING")
    return config.logging
