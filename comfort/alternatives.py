"""
Conditional branching step for comfort validators.

A branch evaluates guarded conditions against the value. A matching
condition either substitutes a literal value (and stops) or splices another
chain's steps onto the running chain (and keeps evaluating conditions).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable, Mapping

from .chain import Chain, Splice
from .exceptions import ConfigurationError
from .types import MISSING, Step

if TYPE_CHECKING:
    from .validator import Validator

logger = logging.getLogger(__name__)

MISSING_THEN = "alternatives.missing_then"


@dataclass(frozen=True, slots=True)
class Condition:
    """
    One guarded branch.

    then/otherwise are either literal values or chains (Chain or Validator).
    Leaving them as MISSING is different from passing None: a true guard
    with a MISSING then is a configuration error, while None matches and
    does nothing.
    """

    guard: Validator
    then: Any = MISSING
    otherwise: Any = MISSING


def to_condition(c: Condition | Mapping[str, Any]) -> Condition:
    """
    Coerce a condition.

    Dict form uses the keys "is" (or "guard"), "then" and "else".
    """
    if isinstance(c, Condition):
        return c

    if not isinstance(c, Mapping):
        raise ConfigurationError(
            "alternatives", f"Condition must be dict or Condition, got {type(c).__name__}"
        )

    guard = c.get("is", c.get("guard"))
    if guard is None or not hasattr(guard, "is_valid"):
        raise ConfigurationError("alternatives", "Condition needs a validator under 'is'")

    return Condition(
        guard=guard,
        then=c.get("then", MISSING),
        otherwise=c.get("else", MISSING),
    )


def _is_chain(target: Any) -> bool:
    return isinstance(target, Chain) or hasattr(target, "is_valid")


def _resolve(target: Any) -> Any:
    """Flatten chain targets into a tuple of steps; literals pass through."""
    if _is_chain(target):
        return tuple(target.steps)
    return target


@dataclass(frozen=True, slots=True)
class _Branch:
    guard: Validator
    then: Any
    otherwise: Any
    then_splices: bool
    otherwise_splices: bool


def alternatives(conditions: Iterable[Condition | Mapping[str, Any]]) -> Step:
    """
    Build a branch step from an ordered list of conditions.

    Chain targets are captured when the step is built, so later changes to
    those chains do not affect it.

    Usage:
        alternatives([
            {"is": is_admin, "then": admin_rules},
            {"is": is_guest, "then": "anonymous", "else": member_rules},
        ])
    """
    branches = []
    for c in conditions:
        cond = to_condition(c)
        branches.append(
            _Branch(
                guard=cond.guard,
                then=_resolve(cond.then),
                otherwise=_resolve(cond.otherwise),
                then_splices=_is_chain(cond.then),
                otherwise_splices=_is_chain(cond.otherwise),
            )
        )

    def branch(value: Any, key: Any = None) -> Any:
        spliced: list[Step] = []

        for i, b in enumerate(branches):
            if b.guard.is_valid(value):
                if b.then is MISSING:
                    raise ConfigurationError(
                        MISSING_THEN, f"Condition {i} matched {value!r} but has no 'then'"
                    )
                target, splices = b.then, b.then_splices
            elif b.otherwise is not MISSING:
                target, splices = b.otherwise, b.otherwise_splices
            else:
                continue

            if splices:
                logger.debug("Condition %d spliced %d steps", i, len(target))
                spliced.extend(target)
            elif target is not None:
                logger.debug("Condition %d replaced value", i)
                return Splice(tuple(spliced), target) if spliced else target

        return Splice(tuple(spliced)) if spliced else None

    return branch
