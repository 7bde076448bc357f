"""Named-operation lookup on transition subjects."""
from __future__ import annotations

from typing import Any, Callable

from tick_transitions.errors import UnknownOperation


def resolve_operation(subject: Any, name: str) -> Callable[..., Any]:
    """Return the callable named *name* on *subject*.

    The subject's attributes act as its operation table. Raises
    ``UnknownOperation`` if the name is missing or not callable.
    """
    op = getattr(subject, name, None)
    if not callable(op):
        raise UnknownOperation(type(subject).__name__, name)
    return op
