"""
Transition engine package.

A minimal rule-driven state-transition engine. An engine owns a state
value and a fixed, ordered table of (precondition, activation) pairs; each
step applies the first transition whose precondition holds.

Modules of interest:
- models: Transition pairs and the immutable TransitionTable.
- engine: The Engine and its single-step evaluation.
- factory: build_engine, wiring config, logging and metrics.
- examples: A bounded counter oscillator table.
"""

from .models import Activation, Precondition, Transition, TransitionTable
from .engine import Engine
from .factory import build_engine

__all__ = [
    "Activation",
    "Precondition",
    "Transition",
    "TransitionTable",
    "Engine",
    "build_engine",
]
