"""
Exception taxonomy for comfort.

ValidationFailure is the recoverable signal raised by steps and absorbed by
the validator. ConfigurationError marks a broken chain or registry and always
reaches the caller.
"""

from __future__ import annotations


class ComfortError(Exception):
    """Base for all comfort errors."""

    def __init__(self, key: str, message: str):
        super().__init__(message)
        self.key = key
        self.message = message


class ValidationFailure(ComfortError):
    """A value was rejected by a step."""


class ConfigurationError(ComfortError):
    """The validator, registry or factory was built incorrectly."""


class UnknownErrorKeyError(ConfigurationError):
    """A failure was raised with a key that has no registered handler."""
