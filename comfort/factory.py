"""
Comfort: factory for named validators.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from .errors import ErrorHandler
from .exceptions import ConfigurationError
from .validator import Validator


class Comfort:
    """
    Factory for validators sharing one error configuration.

    Usage:
        comfort = Comfort(errors={"too_short": {"message": "%s is too short"}})
        name = comfort.any().required()
        same = comfort.create("any").required()
    """

    def __init__(
        self, errors: Optional[Mapping[str, ErrorHandler | Mapping[str, Any]]] = None
    ):
        self.errors = dict(errors or {})
        self._constructors: dict[str, Callable[..., Validator]] = {
            "any": self.any,
        }

    @property
    def names(self) -> list[str]:
        return list(self._constructors)

    def any(self) -> Validator:
        """Validator with an empty chain, accepting any value until built up."""
        return Validator(factory=self, errors=self.errors)

    def create(self, name: str, *args: Any, **kwargs: Any) -> Validator:
        """Build a validator by constructor name."""
        try:
            constructor = self._constructors[name]
        except KeyError:
            raise ConfigurationError(
                name, f"Unknown validator {name!r}, expected one of {self.names}"
            ) from None
        return constructor(*args, **kwargs)
