"""
Transition data models.

A transition pairs a precondition with an activation. Preconditions are
pure predicates over the state; activations mutate the state in place and
are the only mutation path the engine drives.
"""

from typing import Any, Callable, Iterable, Iterator, NamedTuple, Optional, Sequence, Tuple, TypeVar, Union, overload

S = TypeVar("S")

# Generic over the state type: Precondition[MyState], Activation[MyState]
Precondition = Callable[[S], bool]
Activation = Callable[[S], None]


class Transition(NamedTuple):
    """A precondition and the activation it gates.

    ``label`` names the transition in logs and metric labels; without it
    the activation's ``__name__`` is used, which is ambiguous for lambdas.
    """
    precondition: Precondition[Any]
    activation: Activation[Any]
    label: Optional[str] = None

    @property
    def name(self) -> str:
        """Display name used in logs and metric labels."""
        if self.label:
            return self.label
        return getattr(self.activation, "__name__", None) or repr(self.activation)


TransitionLike = Union[
    Transition,
    Tuple[Precondition[Any], Activation[Any]],
    Tuple[Precondition[Any], Activation[Any], Optional[str]],
]


class TransitionTable(Sequence[Transition]):
    """Immutable, ordered table of transitions.

    Position is priority: earlier entries dominate later ones whose
    preconditions hold at the same time. A table holds no per-engine state,
    so one instance may back any number of engines.
    """

    __slots__ = ("_transitions",)

    def __init__(self, transitions: Iterable[TransitionLike] = ()):
        self._transitions: Tuple[Transition, ...] = tuple(
            t if isinstance(t, Transition) else Transition(*t) for t in transitions
        )

    @overload
    def __getitem__(self, index: int) -> Transition: ...

    @overload
    def __getitem__(self, index: slice) -> "TransitionTable": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return TransitionTable(self._transitions[index])
        return self._transitions[index]

    def __len__(self) -> int:
        return len(self._transitions)

    def __iter__(self) -> Iterator[Transition]:
        return iter(self._transitions)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TransitionTable):
            return self._transitions == other._transitions
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._transitions)

    def __repr__(self) -> str:
        names = ", ".join(t.name for t in self._transitions)
        return f"TransitionTable([{names}])"
