"""tick-transitions - Guarded state transitions for declarative state machines."""
from __future__ import annotations

from tick_transitions.actions import (
    ActionSequence,
    CallableAction,
    NamedAction,
    NoAction,
    UnrecognizedAction,
    action_spec,
)
from tick_transitions.errors import (
    GuardFailure,
    TransitionError,
    UnknownOperation,
    UnrecognizedActionSpec,
)
from tick_transitions.guards import (
    CallableGuard,
    GuardResult,
    NamedGuard,
    PassGuard,
    Status,
    guard_spec,
    guard_specs,
    passes,
    probe,
)
from tick_transitions.operations import resolve_operation
from tick_transitions.transition import TransitionSpec

__all__ = [
    "TransitionSpec",
    "NamedGuard",
    "CallableGuard",
    "PassGuard",
    "GuardResult",
    "Status",
    "guard_spec",
    "guard_specs",
    "passes",
    "probe",
    "NamedAction",
    "CallableAction",
    "ActionSequence",
    "NoAction",
    "UnrecognizedAction",
    "action_spec",
    "resolve_operation",
    "TransitionError",
    "GuardFailure",
    "UnrecognizedActionSpec",
    "UnknownOperation",
]
