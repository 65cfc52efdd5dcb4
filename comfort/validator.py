"""
Validator: the fluent builder and callable entry point for comfort.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Iterable, Mapping, NoReturn, Optional

from .alternatives import Condition
from .alternatives import alternatives as _alternatives
from .chain import Chain, invoke
from .errors import ErrorHandler, ErrorRegistry
from .exceptions import ConfigurationError, ValidationFailure
from .types import Failure, Step

if TYPE_CHECKING:
    from .factory import Comfort


class ResultMode(Enum):
    """How a failed invocation is reported."""

    BOOL = "bool"  # Return False
    ERROR = "error"  # Return a Failure


class Validator:
    """
    Ordered chain of validation steps with an error registry.

    Builder methods append to the chain and return self:

        v = Validator().required().add(lambda s: s.strip()).to_bool(False)
        v("  hi ")   # "hi"
        v(None)      # Failure(key="required", message="value is required")

    Subclasses may declare error_handlers to extend the baseline registry.
    """

    error_handlers: ClassVar[Mapping[str, ErrorHandler | Mapping[str, Any]]] = {}

    def __init__(
        self,
        factory: Optional[Comfort] = None,
        errors: Optional[Mapping[str, ErrorHandler | Mapping[str, Any]]] = None,
    ):
        self._factory = factory
        self._chain = Chain()
        self._errors = ErrorRegistry(type(self).error_handlers, errors)
        self._mode = ResultMode.BOOL

    # -- invocation ---------------------------------------------------------

    def __call__(self, value: Any, key: Any = None) -> Any:
        """
        Validate a value.

        Returns:
            The threaded value if every step passes
            False (BOOL mode) or a Failure (ERROR mode) if a step fails

        Raises:
            ConfigurationError: Regardless of mode
        """
        try:
            return invoke(self._chain, value, key)
        except ValidationFailure as e:
            if self._mode is ResultMode.BOOL:
                return False
            return Failure.from_exception(e)

    def is_valid(self, value: Any, key: Any = None) -> bool:
        """Run the chain and report only whether it passed."""
        try:
            invoke(self._chain, value, key)
        except ValidationFailure:
            return False
        return True

    # -- builder ------------------------------------------------------------

    def add(self, step: Step) -> Validator:
        """Append an ad hoc step: fn(value) or fn(value, key)."""
        self._chain.append(step)
        return self

    def required(self) -> Validator:
        """Reject None."""

        def required(value: Any, key: Any = None) -> None:
            if value is None:
                label = key if key is not None else self._errors.default_label("required")
                self.create_failure("required", value, label)

        return self.add(required)

    def alternatives(
        self, conditions: Iterable[Condition | Mapping[str, Any]]
    ) -> Validator:
        """Append a conditional branch; see comfort.alternatives."""
        return self.add(_alternatives(conditions))

    def to_bool(self, flag: bool = True) -> Validator:
        """On failure return False (True) or a Failure (False)."""
        self._mode = ResultMode.BOOL if flag else ResultMode.ERROR
        return self

    # -- accessors ----------------------------------------------------------

    @property
    def mode(self) -> ResultMode:
        return self._mode

    @property
    def steps(self) -> tuple[Step, ...]:
        return self._chain.steps

    @property
    def chain(self) -> Chain:
        return self._chain

    @property
    def errors(self) -> ErrorRegistry:
        return self._errors

    @property
    def factory(self) -> Optional[Comfort]:
        return self._factory

    def create(self, name: str, *args: Any, **kwargs: Any) -> Validator:
        """Build a named validator through this validator's factory."""
        if self._factory is None:
            raise ConfigurationError(name, "Validator has no factory to create from")
        return self._factory.create(name, *args, **kwargs)

    def create_failure(
        self, key: str, value: Any = None, value_key: Any = None
    ) -> NoReturn:
        """Raise the registered failure for key."""
        self._errors.create_failure(key, value, value_key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._chain)} steps, mode={self._mode.value})"
