"""
Chain of validation steps and the invoker that runs it.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from functools import wraps
from typing import Any, Iterable, Iterator

from .exceptions import ValidationFailure
from .keep import KEEP
from .types import Step

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Splice:
    """
    Step result asking the invoker to append steps to the running chain.

    The steps run after every step already queued for this invocation. If
    value is not None it also replaces the threaded value.
    """

    steps: tuple[Step, ...]
    value: Any = None


def _is_python_callable(fn: Step) -> bool:
    if inspect.isfunction(fn) or inspect.ismethod(fn):
        return True
    return inspect.isfunction(getattr(type(fn), "__call__", None))


def _accepts_key(fn: Step) -> bool:
    """
    Check whether fn should be called with (value, key).

    Python functions and methods get the key when they take a second
    positional parameter. Builtins and other callables only get it when that
    parameter is required, so round() or str.split stay unary.
    """
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return False

    python_defined = _is_python_callable(fn)
    positional = []
    for param in sig.parameters.values():
        if param.kind is param.VAR_POSITIONAL:
            return python_defined
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            positional.append(param)

    if len(positional) < 2:
        return False
    return python_defined or positional[1].default is inspect.Parameter.empty


def as_step(fn: Step) -> Step:
    """
    Normalize a callable to the (value, key) step signature.

    Unary callables are wrapped so the key is dropped.
    """
    if not callable(fn):
        raise TypeError(f"Step must be callable, got {type(fn).__name__}")
    if _accepts_key(fn):
        return fn

    @wraps(fn)
    def step(value: Any, key: Any = None) -> Any:
        return fn(value)

    return step


class Chain:
    """Ordered, append-only sequence of steps."""

    def __init__(self, steps: Iterable[Step] = ()):
        self._steps: list[Step] = []
        self.extend(steps)

    def append(self, step: Step) -> None:
        self._steps.append(as_step(step))

    def extend(self, steps: Iterable[Step]) -> None:
        for step in steps:
            self.append(step)

    @property
    def steps(self) -> tuple[Step, ...]:
        """Read-only view of the steps in insertion order."""
        return tuple(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def __repr__(self) -> str:
        return f"Chain({len(self._steps)} steps)"

    def __call__(self, value: Any, key: Any = None) -> Any:
        return invoke(self, value, key)


def invoke(chain: Chain | Iterable[Step], value: Any, key: Any = None) -> Any:
    """
    Run steps in order, threading the value through them.

    Args:
        chain: Chain (or iterable of normalized steps) to run
        value: Input value
        key: Optional label passed to every step

    Returns:
        The final threaded value

    Raises:
        ValidationFailure: From the first failing step; later steps never run
    """
    # Spliced steps land here, never on the chain itself
    pending = list(chain.steps if isinstance(chain, Chain) else chain)

    i = 0
    while i < len(pending):
        step = pending[i]
        i += 1
        try:
            result = step(value, key)
        except ValidationFailure as e:
            logger.debug("Step %d failed with %r", i, e.key)
            raise

        if isinstance(result, Splice):
            pending.extend(result.steps)
            result = result.value

        if isinstance(result, KEEP):
            value = result.value
        elif result is not None:
            value = result

    return value
