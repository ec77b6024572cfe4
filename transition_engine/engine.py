"""
Transition engine.

Holds one state value and a fixed transition table. Each call to ``fire``
scans the table from the top and applies the first transition whose
precondition holds; if none holds the state is left untouched.
"""

from typing import Any, Generic, Iterable, Optional, Tuple, Union

from shared.errors import ValidationError
from shared.logging import get_logger
from shared.metrics import MetricsCollector
from .models import Activation, Precondition, S, Transition, TransitionTable


class Engine(Generic[S]):
    """First-match rule engine over a caller-owned state type.

    The engine keeps the state object it was given and mutates it only
    through activations. ``get_state`` returns that same object; treat it as
    read-only and do not hold on to it across ``fire`` calls. The table is
    never modified, so a ``TransitionTable`` can be passed to many engines.

    Nothing guards against tables that loop forever without progress; that
    is a property of the rules, not of the engine.
    """

    def __init__(
        self,
        state: S,
        transition_table: Union[
            TransitionTable,
            Iterable[Union[Transition, Tuple[Precondition[S], Activation[S]]]],
        ],
        *,
        metrics: Optional[MetricsCollector] = None,
        name: str = "engine",
    ):
        self.name = name
        self.logger = get_logger("transition_engine.engine").bind(engine=name)
        self.metrics = metrics
        self._state = state
        if isinstance(transition_table, TransitionTable):
            self._table = transition_table
        else:
            self._table = TransitionTable(transition_table)
        self.logger.debug("Engine created", transitions=len(self._table))

    @property
    def state(self) -> S:
        return self._state

    @property
    def table(self) -> TransitionTable:
        return self._table

    def get_state(self) -> S:
        """Return the current state."""
        return self._state

    def fire(self) -> None:
        """Apply the first transition whose precondition holds, if any."""
        if self.metrics is None:
            self._step()
            return

        with self.metrics.time_operation("engine_fire_duration_seconds", engine=self.name):
            fired = self._step()
        self.metrics.record_fire(fired.name if fired is not None else None, engine=self.name)

    def run(self, steps: int) -> None:
        """Call ``fire`` exactly ``steps`` times."""
        if steps < 0:
            raise ValidationError(
                "Step count must not be negative",
                details={"steps": steps}
            )
        for _ in range(steps):
            self.fire()

    def _step(self) -> Optional[Transition]:
        for index, transition in enumerate(self._table):
            if self._invoke(index, "precondition", transition.precondition):
                self._invoke(index, "activation", transition.activation)
                self.logger.debug("Transition fired", index=index, transition=transition.name)
                return transition
        self.logger.debug("No transition applicable")
        return None

    def _invoke(self, index: int, phase: str, func: Any) -> Any:
        try:
            return func(self._state)
        except Exception as e:
            if self.metrics is not None:
                self.metrics.record_error(engine=self.name)
            self.logger.error(
                "Transition raised",
                index=index,
                phase=phase,
                transition=self._table[index].name,
                error=str(e)
            )
            raise

    def __repr__(self) -> str:
        return f"Engine(name={self.name!r}, state={self._state!r}, transitions={len(self._table)})"
