"""End-to-end guard failure scenarios driven through a minimal event layer."""
from __future__ import annotations

from typing import Any

import pytest
from tick_transitions import GuardFailure, TransitionSpec


class Car:
    """Subject whose guards fail in different ways."""

    def __init__(self) -> None:
        self.state = "parked"
        self.log: list[str] = []

    def race_car(self):
        return False

    def rocket(self, boost=100):
        if boost < 10:
            return False
        return None

    def submarine(self):
        raise RuntimeError

    def sports_car(self):
        return True

    def amphibious(self):
        raise RuntimeError("not fitted")

    def ignite(self, *args):
        self.log.append("ignite")


EVENTS: dict[str, list[TransitionSpec]] = {
    "start": [
        TransitionSpec.from_config(
            {"from": "parked", "to": "engine_started", "guard": "race_car"}
        ),
    ],
    "lift_off": [
        TransitionSpec.from_config({"from": "parked", "to": "airborne", "guard": "rocket"}),
    ],
    "submerge": [
        TransitionSpec.from_config(
            {"from": "parked", "to": "under_water", "guard": "submarine"}
        ),
    ],
    "drive": [
        TransitionSpec.from_config({"from": "driving", "to": "parked"}),
        TransitionSpec.from_config(
            {"from": "parked", "to": "driving", "guard": "amphibious"}
        ),
        TransitionSpec.from_config(
            {"from": "parked", "to": "driving", "guard": "race_car"}
        ),
        TransitionSpec.from_config(
            {
                "from": "parked",
                "to": "driving",
                "guard": "sports_car",
                "on_transition": "ignite",
            }
        ),
    ],
}


def fire(subject: Car, event: str, *args: Any) -> None:
    """Try each candidate in order; surface a GuardFailure if none is executable."""
    candidates = [t for t in EVENTS[event] if t.matches(subject.state)]
    if not candidates:
        raise LookupError(f"No `{event}` transition from `{subject.state}`")
    for transition in candidates:
        if transition.first_failure(subject, *args) is None:
            transition.execute(subject, *args)
            subject.state = transition.to_state
            return
    candidates[0].ensure_executable(subject, *args)


class TestGuardFailureScenarios:
    def test_raises_guard_failure_when_guard_returns_false(self):
        car = Car()
        with pytest.raises(GuardFailure) as exc_info:
            fire(car, "start")
        message = str(exc_info.value)
        assert "from `parked` to `engine_started`" in message
        assert "guard `race_car` failed" in message
        assert "with arguments" not in message
        assert car.state == "parked"

    def test_message_includes_arguments(self):
        car = Car()
        expected = (
            "Transitions: Transition for instance of `Car` from `parked` to"
            " `airborne` failed because the guard `rocket` failed with arguments `[5]`"
        )
        with pytest.raises(GuardFailure) as exc_info:
            fire(car, "lift_off", 5)
        assert str(exc_info.value) == expected

    def test_none_result_fails_guard(self):
        """rocket() without a low boost returns None, which also fails."""
        car = Car()
        with pytest.raises(GuardFailure, match="guard `rocket` failed$"):
            fire(car, "lift_off")

    def test_guard_exception_wrapped_in_guard_failure(self):
        car = Car()
        with pytest.raises(GuardFailure, match="guard `submarine` failed"):
            fire(car, "submerge")

    def test_first_executable_candidate_wins(self):
        car = Car()
        fire(car, "drive")
        assert car.state == "driving"
        assert car.log == ["ignite"]

    def test_raising_guard_candidate_is_skipped(self):
        """A candidate whose guard raises does not stop later candidates."""
        car = Car()
        fire(car, "drive")
        assert car.state == "driving"

    def test_guard_exception_does_not_escape(self):
        car = Car()
        with pytest.raises(GuardFailure) as exc_info:
            fire(car, "submerge")
        assert not isinstance(exc_info.value, RuntimeError)
        assert exc_info.value.__context__ is None
        assert car.state == "parked"

    def test_no_matching_candidate(self):
        car = Car()
        car.state = "under_water"
        with pytest.raises(LookupError, match="No `start` transition from `under_water`"):
            fire(car, "start")
