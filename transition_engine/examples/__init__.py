"""Example transition tables."""

from .oscillator import (
    OSCILLATOR_TABLE,
    OscillatorState,
    decrement,
    increment,
    needs_decrease,
    needs_increase,
)

__all__ = [
    "OSCILLATOR_TABLE",
    "OscillatorState",
    "decrement",
    "increment",
    "needs_decrease",
    "needs_increase",
]
