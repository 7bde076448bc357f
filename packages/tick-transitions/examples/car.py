"""Car -- guarded transitions driven by a tiny event layer.

Demonstrates:
- Declaring transitions from configuration records
- Filtering candidates by the current state with ``matches``
- Picking the first executable candidate and running its action
- Surfacing a ``GuardFailure`` when no candidate is executable, including
  when a guard raises

Run: python -m examples.car
"""

from tick_transitions import GuardFailure, TransitionSpec


class Car:
    def __init__(self) -> None:
        self.state = "parked"
        self.fuel = 0

    def has_fuel(self, *args) -> bool:
        return self.fuel > 0

    def refuel(self, litres: int = 10) -> None:
        self.fuel += litres

    def start_engine(self, *args) -> None:
        print("  vroom")

    def has_turbo(self, *args) -> bool:
        raise NotImplementedError("no turbo fitted")


# Event name -> candidate transitions, tried in order.
EVENTS = {
    "fill_up": [
        TransitionSpec.from_config(
            {"from": "parked", "to": "parked", "on_transition": "refuel"}
        ),
    ],
    "start": [
        TransitionSpec.from_config(
            {
                "from": "parked",
                "to": "engine_started",
                "guard": "has_fuel",
                "on_transition": "start_engine",
            }
        ),
    ],
    "boost": [
        TransitionSpec.from_config(
            {"from": "engine_started", "to": "boosting", "guard": "has_turbo"}
        ),
    ],
}


def fire(car: Car, event: str, *args) -> None:
    candidates = [t for t in EVENTS[event] if t.matches(car.state)]
    if not candidates:
        raise LookupError(f"No `{event}` transition from `{car.state}`")
    for transition in candidates:
        if transition.first_failure(car, *args) is None:
            transition.execute(car, *args)
            car.state = transition.to_state
            return
    candidates[0].ensure_executable(car, *args)


def main() -> None:
    print("=== Car ===\n")
    car = Car()

    try:
        fire(car, "start")
    except GuardFailure as exc:
        print(f"  rejected: {exc}")

    fire(car, "fill_up", 25)
    print(f"  fuel: {car.fuel}")

    fire(car, "start")

    # A guard that raises is reported as a GuardFailure too.
    try:
        fire(car, "boost")
    except GuardFailure as exc:
        print(f"  rejected: {exc}")

    print(f"\nDone. Car is {car.state}.")


if __name__ == "__main__":
    main()
