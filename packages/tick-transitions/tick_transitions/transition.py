"""TransitionSpec - one guarded edge of a state graph."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from tick_transitions.actions import ActionSpec, NoAction, action_spec
from tick_transitions.errors import GuardFailure
from tick_transitions.guards import GuardResult, GuardSpec, guard_specs, passes, probe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransitionSpec:
    """Edge ``from_state -> to_state`` with guards and an on-transition action.

    Identity is the ``(from_state, to_state)`` pair: guards and actions take no
    part in equality or hashing.

    ``guards`` accepts a single guard value or a (possibly nested) sequence of
    them; ``on_transition`` accepts a name, a callable, a sequence of names or
    ``None``. Both are normalized on construction but not validated: an
    unsupported action only raises ``UnrecognizedActionSpec`` from
    ``execute``.

    Guards and actions are invoked as ``fn(subject, *args)`` for callables or
    ``subject.<name>(*args)`` for names, where *args* are the arguments the
    transition was triggered with.
    """

    from_state: Any
    to_state: Any
    guards: tuple[GuardSpec, ...] = field(default=(), compare=False)
    on_transition: ActionSpec = field(default_factory=NoAction, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "guards", guard_specs(self.guards))
        object.__setattr__(self, "on_transition", action_spec(self.on_transition))

    @classmethod
    def from_config(cls, opts: Mapping[str, Any]) -> TransitionSpec:
        """Build from a ``{"from", "to", "guard", "on_transition"}`` record.

        Missing keys are treated as ``None``.
        """
        return cls(
            from_state=opts.get("from"),
            to_state=opts.get("to"),
            guards=opts.get("guard"),
            on_transition=opts.get("on_transition"),
        )

    # --- Queries ---

    def matches(self, state: Any) -> bool:
        """True if this transition leaves *state*."""
        return self.from_state == state

    def is_executable(self, subject: Any, *args: Any) -> bool:
        """True if every guard passes. Stops at the first failing guard.

        Exceptions raised by a guard propagate.
        """
        return all(passes(g.check(subject, *args)) for g in self.guards)

    def first_failure(self, subject: Any, *args: Any) -> GuardResult | None:
        """Return the first failing guard result, or None if all guards pass.

        Guards that raise count as failed; the exception is kept on the result.
        """
        for guard in self.guards:
            result = probe(guard, subject, *args)
            if not result.passed:
                return result
        return None

    def ensure_executable(self, subject: Any, *args: Any) -> None:
        """Raise ``GuardFailure`` for the first guard that fails or raises."""
        failure = self.first_failure(subject, *args)
        if failure is None:
            return
        error = GuardFailure(
            type(subject).__name__,
            self.from_state,
            self.to_state,
            failure.guard,
            args,
        )
        logger.debug("%s", error)
        raise error

    # --- Execution ---

    def execute(self, subject: Any, *args: Any) -> None:
        """Run the on-transition action. Exceptions from the action propagate."""
        logger.debug(
            "Executing %s for %s -> %s on `%s`",
            type(self.on_transition).__name__,
            self.from_state,
            self.to_state,
            type(subject).__name__,
        )
        self.on_transition.run(subject, *args)
