"""
Type definitions for comfort.

Provides the Failure value, the MISSING sentinel and type aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from .exceptions import ComfortError


class _Missing(Enum):
    """Sentinel for a condition target that was never given."""

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing.MISSING


@dataclass(frozen=True, slots=True)
class Failure:
    """Structured outcome of a rejected value."""

    key: str
    message: str

    @classmethod
    def from_exception(cls, exc: ComfortError) -> Failure:
        return cls(key=exc.key, message=exc.message)

    def __bool__(self) -> bool:
        return False


# Type aliases
Step = Callable[..., Any]
Formatter = Callable[[str, Any], str]
