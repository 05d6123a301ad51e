"""
Device-style free functions over EngineState.

These mirror the per-lane calls a generation kernel makes: build a state,
draw from it, skip it forward. They carry no restart hooks; callers that
keep a deferred-Gaussian cache next to the state use Mrg32k3aEngine.

`next` shadows the builtin of the same name, so import the module
(`from mrg32k3a import api`, then `api.next(state)`) rather than
star-importing it.
"""

from .constants import DEFAULT_SEED
from .engine import next_state, seed_state
from .jump import discard_sequence_state, discard_state, discard_subsequence_state
from .state import EngineState

__all__ = [
    'init',
    'next',
    'skip_ahead',
    'skip_ahead_subsequence',
    'skip_ahead_sequence',
]


def init(seed: int = DEFAULT_SEED, subsequence: int = 0, offset: int = 0) -> EngineState:
    """New state for seed, moved to subsequence and then offset steps further."""
    state = EngineState()
    seed_state(state, seed, subsequence, offset)
    return state


def next(state: EngineState) -> int:
    """Return one raw value in [1, 4294967087] and advance state by one."""
    return next_state(state)


def skip_ahead(state: EngineState, offset: int) -> None:
    discard_state(state, offset)


def skip_ahead_subsequence(state: EngineState, subsequence: int) -> None:
    """Skip subsequence blocks of 2^67 values."""
    discard_subsequence_state(state, subsequence)


def skip_ahead_sequence(state: EngineState, sequence: int) -> None:
    """Skip sequence blocks of 2^127 values."""
    discard_sequence_state(state, sequence)
