"""
Bounded counter oscillator.

The counter climbs from ``min_val`` to ``max_val``, turns around, falls
back to ``min_val`` and repeats, with period ``2 * (max_val - min_val)``.
"""

from dataclasses import dataclass, field

from shared.errors import ValidationError
from ..models import Transition, TransitionTable


@dataclass
class OscillatorState:
    min_val: int
    max_val: int
    increasing: bool = True
    count: int = field(init=False)

    def __post_init__(self):
        if self.max_val < self.min_val:
            raise ValidationError(
                "max_val must not be below min_val",
                details={"min_val": self.min_val, "max_val": self.max_val}
            )
        self.count = self.min_val if self.increasing else self.max_val


def needs_decrease(state: OscillatorState) -> bool:
    return state.count >= state.max_val or (not state.increasing and state.count > state.min_val)


def needs_increase(state: OscillatorState) -> bool:
    return state.count <= state.min_val or (state.increasing and state.count < state.max_val)


def decrement(state: OscillatorState) -> None:
    state.increasing = False
    state.count -= 1


def increment(state: OscillatorState) -> None:
    state.increasing = True
    state.count += 1


# Decrease is checked first so the turn at max_val wins over "still increasing".
OSCILLATOR_TABLE = TransitionTable([
    Transition(needs_decrease, decrement),
    Transition(needs_increase, increment),
])
