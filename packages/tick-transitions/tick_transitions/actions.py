"""On-transition action variants and dispatch."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Union

from tick_transitions.errors import UnrecognizedActionSpec
from tick_transitions.operations import resolve_operation


@dataclass(frozen=True)
class NamedAction:
    """Calls the subject's operation *name* with the transition arguments."""

    name: str

    def run(self, subject: Any, *args: Any) -> None:
        resolve_operation(subject, self.name)(*args)


@dataclass(frozen=True)
class CallableAction:
    """Calls ``fn(subject, *args)``."""

    fn: Callable[..., Any]

    def run(self, subject: Any, *args: Any) -> None:
        self.fn(subject, *args)


@dataclass(frozen=True)
class ActionSequence:
    """Calls each named operation in order. Stops at the first exception.

    Entries are checked as they are reached, so a non-``str`` entry raises
    ``UnrecognizedActionSpec`` only after the entries before it have run.
    """

    names: tuple[Any, ...] = field(default_factory=tuple)

    def run(self, subject: Any, *args: Any) -> None:
        for name in self.names:
            if not isinstance(name, str):
                raise UnrecognizedActionSpec(type(name))
            resolve_operation(subject, name)(*args)


@dataclass(frozen=True)
class NoAction:
    """No side effect."""

    def run(self, subject: Any, *args: Any) -> None:
        return None


@dataclass(frozen=True)
class UnrecognizedAction:
    """Holds an unsupported ``on_transition`` value until it is executed."""

    value: Any

    def run(self, subject: Any, *args: Any) -> None:
        raise UnrecognizedActionSpec(type(self.value))


ActionSpec = Union[
    NamedAction, CallableAction, ActionSequence, NoAction, UnrecognizedAction
]

_ACTION_TYPES = (
    NamedAction,
    CallableAction,
    ActionSequence,
    NoAction,
    UnrecognizedAction,
)


def action_spec(value: Any) -> ActionSpec:
    """Coerce a raw ``on_transition`` value into an action variant.

    Never raises: unsupported values, classes included, are wrapped in
    ``UnrecognizedAction`` and only rejected when the transition executes.
    """
    if isinstance(value, _ACTION_TYPES):
        return value
    if value is None:
        return NoAction()
    if isinstance(value, str):
        return NamedAction(value)
    if isinstance(value, (list, tuple)):
        return ActionSequence(tuple(value))
    if callable(value) and not isinstance(value, type):
        return CallableAction(value)
    return UnrecognizedAction(value)
