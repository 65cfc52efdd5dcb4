"""
Comfort - composable value validation chains.

Usage:
    from comfort import Comfort

    comfort = Comfort()
    name = comfort.any().required().add(lambda s: s.strip())

    name("  Alice ")   # "Alice"
    name(None)         # False
    name.to_bool(False)(None, "name")   # Failure(key="required", ...)
"""

from .alternatives import Condition, alternatives
from .chain import Chain, Splice, invoke
from .errors import ErrorHandler, ErrorRegistry
from .exceptions import (
    ComfortError,
    ConfigurationError,
    UnknownErrorKeyError,
    ValidationFailure,
)
from .factory import Comfort
from .keep import KEEP
from .types import MISSING, Failure
from .validator import ResultMode, Validator

__all__ = [
    # Core
    "Comfort",
    "Validator",
    "ResultMode",
    "Chain",
    "Splice",
    "invoke",
    # Branching
    "Condition",
    "alternatives",
    "MISSING",
    # Errors
    "ErrorHandler",
    "ErrorRegistry",
    "Failure",
    "ComfortError",
    "ValidationFailure",
    "ConfigurationError",
    "UnknownErrorKeyError",
    # Wrappers
    "KEEP",
]
