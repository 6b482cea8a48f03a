"""
Utilities module for the optional-value package.

Configuration and logging setup live in ``config_manager`` and
``logging_utils``; import them from there. They are not loaded here so
that importing the container never reads the environment.
"""

from optional_value.utils.error_manager import OptionalValueError, NullReferenceError, NoSuchElementError

__all__ = ["OptionalValueError", "NullReferenceError", "NoSuchElementError"]
