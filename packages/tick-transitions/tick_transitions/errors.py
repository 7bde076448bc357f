"""Exceptions raised by transition evaluation and execution."""
from __future__ import annotations

from typing import Any


class TransitionError(Exception):
    """Base class for tick-transitions errors."""


class GuardFailure(TransitionError):
    """Raised when a guard rejects a transition.

    Carries the subject type name, both endpoints, the failing guard and the
    arguments the transition was attempted with.
    """

    def __init__(
        self,
        subject_type: str,
        from_state: Any,
        to_state: Any,
        guard: Any,
        args: tuple[Any, ...] = (),
    ) -> None:
        self.subject_type = subject_type
        self.from_state = from_state
        self.to_state = to_state
        self.guard = guard
        self.arguments = args
        super().__init__(
            guard_failure_message(subject_type, from_state, to_state, guard, args)
        )

    def __reduce__(self):
        return (
            type(self),
            (self.subject_type, self.from_state, self.to_state, self.guard, self.arguments),
        )


class UnrecognizedActionSpec(TransitionError, TypeError):
    """Raised when ``on_transition`` holds a value of an unsupported type."""

    def __init__(self, actual_type: type) -> None:
        self.actual_type = actual_type
        super().__init__(
            "You can only pass a str, a callable or a list of str to "
            f"'on_transition' - got {actual_type.__name__}."
        )

    def __reduce__(self):
        return (type(self), (self.actual_type,))


class UnknownOperation(TransitionError, AttributeError):
    """Raised when a subject has no callable operation with the given name."""

    def __init__(self, subject_type: str, name: str) -> None:
        # AttributeError.__init__ resets ``name``, so assign afterwards.
        super().__init__(f"`{subject_type}` has no operation named `{name}`")
        self.subject_type = subject_type
        self.name = name

    def __reduce__(self):
        return (type(self), (self.subject_type, self.name))


def guard_failure_message(
    subject_type: str,
    from_state: Any,
    to_state: Any,
    guard: Any,
    args: tuple[Any, ...] = (),
) -> str:
    """Build the diagnostic for a rejected transition.

    The ``with arguments`` suffix is only present when *args* is non-empty.

    >>> guard_failure_message("Car", "parked", "airborne", "rocket", (5,))
    'Transitions: Transition for instance of `Car` from `parked` to `airborne` failed because the guard `rocket` failed with arguments `[5]`'
    """
    message = (
        f"Transitions: Transition for instance of `{subject_type}` from "
        f"`{from_state}` to `{to_state}` failed because the guard `{guard}` failed"
    )
    if args:
        message += f" with arguments `{list(args)!r}`"
    return message
