"""
Error handler registry for comfort.

Maps error keys to message templates and turns a key plus the offending value
into a raised ValidationFailure.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, NoReturn, Optional

from pydantic import BaseModel, ConfigDict

from .exceptions import ConfigurationError, UnknownErrorKeyError, ValidationFailure
from .types import Formatter

logger = logging.getLogger(__name__)

DEFAULT_KEY = "default"


class ErrorHandler(BaseModel):
    """
    Message configuration for one error key.

    Args:
        message: Template with a single %-style slot for the display value
        default: Label shown when no display value is available
        message_formatter: Optional callable(template, display) -> str
    """

    model_config = ConfigDict(frozen=True)

    message: str
    default: Optional[str] = None
    # Checked when used, not here: a non-callable is a ConfigurationError
    message_formatter: Any = None


BASELINE: dict[str, ErrorHandler] = {
    DEFAULT_KEY: ErrorHandler(message="There was a validation error"),
    "required": ErrorHandler(message="%s is required", default="value"),
}


def to_handler(entry: ErrorHandler | Mapping[str, Any]) -> ErrorHandler:
    """Coerce a dict entry to an ErrorHandler."""
    if isinstance(entry, ErrorHandler):
        return entry
    return ErrorHandler.model_validate(entry)


def default_formatter(template: str, display: Any) -> str:
    """Substitute display into the single %-slot of template."""
    if "%" not in template:
        return template
    return template % (display,)


class ErrorRegistry:
    """
    Keyed error handlers layered over the fixed baseline.

    Later layers win, except for the "default" entry which always comes from
    the baseline.
    """

    def __init__(self, *layers: Mapping[str, ErrorHandler | Mapping[str, Any]] | None):
        handlers = dict(BASELINE)
        for layer in layers:
            if not layer:
                continue
            for key, entry in layer.items():
                if key == DEFAULT_KEY:
                    continue
                handlers[key] = to_handler(entry)
        self._handlers = handlers

    def __contains__(self, key: object) -> bool:
        return key in self._handlers

    def __getitem__(self, key: str) -> ErrorHandler:
        return self._handlers[key]

    def keys(self) -> list[str]:
        return list(self._handlers)

    def default_label(self, key: str) -> Optional[str]:
        """Return the default label for key, falling back to the baseline entry."""
        handler = self._handlers.get(key)
        if handler is not None and handler.default is not None:
            return handler.default
        baseline = BASELINE.get(key)
        return baseline.default if baseline is not None else None

    def format(self, key: str, value: Any = None, value_key: Any = None) -> str:
        """
        Build the failure message for a registered key.

        Raises:
            UnknownErrorKeyError: If key is not registered
            ConfigurationError: If the handler's formatter is not callable or
                cannot format its template
        """
        if key not in self._handlers:
            logger.debug("No error handler for %r, using default entry", key)
            raise UnknownErrorKeyError(key, self._handlers[DEFAULT_KEY].message)

        handler = self._handlers[key]
        formatter: Formatter = handler.message_formatter
        if formatter is None:
            formatter = default_formatter
        elif not callable(formatter):
            raise ConfigurationError(key, '"message_formatter" must be callable')

        display = value_key if value_key is not None else f"'{value}'"
        if display == "":
            display = self.default_label(key) or display

        try:
            return formatter(handler.message, display)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                key, f"Cannot format message {handler.message!r}: {e}"
            ) from e

    def create_failure(
        self, key: str, value: Any = None, value_key: Any = None
    ) -> NoReturn:
        """Raise a ValidationFailure for key with a formatted message."""
        raise ValidationFailure(key, self.format(key, value, value_key))
