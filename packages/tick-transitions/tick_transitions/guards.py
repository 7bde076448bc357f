"""Guard variants, coercion and evaluation."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Union

from tick_transitions.operations import resolve_operation

logger = logging.getLogger(__name__)


class Status(Enum):
    """Outcome of evaluating a single guard."""

    PASS = "pass"
    FAIL = "fail"


# --- Guard variants ---


@dataclass(frozen=True)
class NamedGuard:
    """Calls the subject's operation *name* with the transition arguments."""

    name: str

    def check(self, subject: Any, *args: Any) -> Any:
        return resolve_operation(subject, self.name)(*args)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class CallableGuard:
    """Calls ``fn(subject, *args)``."""

    fn: Callable[..., Any]

    def check(self, subject: Any, *args: Any) -> Any:
        return self.fn(subject, *args)

    def __str__(self) -> str:
        return str(self.fn)


@dataclass(frozen=True)
class PassGuard:
    """Fallback for values that are neither callables nor names. Always passes."""

    value: Any = None

    def check(self, subject: Any, *args: Any) -> Any:
        return True

    def __str__(self) -> str:
        return str(self.value)


GuardSpec = Union[NamedGuard, CallableGuard, PassGuard]

_GUARD_TYPES = (NamedGuard, CallableGuard, PassGuard)


@dataclass(frozen=True)
class GuardResult:
    """Captured result of one guard. ``error`` is set if the guard raised."""

    guard: GuardSpec
    status: Status
    error: Exception | None = None

    @property
    def passed(self) -> bool:
        return self.status is Status.PASS


# --- Coercion ---


def guard_spec(value: Any) -> GuardSpec:
    """Coerce a raw configuration value into a guard variant.

    Callables win over names, names over everything else. Classes are not
    treated as callables.
    """
    if isinstance(value, _GUARD_TYPES):
        return value
    if callable(value) and not isinstance(value, type):
        return CallableGuard(value)
    if isinstance(value, str):
        return NamedGuard(value)
    return PassGuard(value)


def guard_specs(value: Any) -> tuple[GuardSpec, ...]:
    """Normalize a ``guard`` configuration entry into a flat tuple of guards.

    ``None`` means no guards. Lists and tuples are flattened recursively; any
    other value becomes a one-element tuple.
    """
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)):
        return (guard_spec(value),)
    flat: list[GuardSpec] = []
    for item in value:
        if isinstance(item, (list, tuple)):
            flat.extend(guard_specs(item))
        else:
            flat.append(guard_spec(item))
    return tuple(flat)


# --- Evaluation ---


def passes(result: Any) -> bool:
    """Only ``False`` and ``None`` fail a guard. ``0``, ``""`` and ``[]`` pass."""
    return result is not False and result is not None


def probe(guard: GuardSpec, subject: Any, *args: Any) -> GuardResult:
    """Evaluate *guard* without raising. A raised exception becomes FAIL."""
    try:
        result = guard.check(subject, *args)
    except Exception as exc:
        logger.debug("Guard `%s` raised %r, treating it as failed", guard, exc)
        return GuardResult(guard, Status.FAIL, error=exc)
    return GuardResult(guard, Status.PASS if passes(result) else Status.FAIL)
