"""
MRG32k3a Engine
===============

L'Ecuyer's combined multiple recursive generator, positioned by
(seed, subsequence, offset):

    - seed selects the starting windows,
    - subsequence skips blocks of 2^67 outputs,
    - offset skips single outputs.

Instances are plain values with no shared state, so one engine per
parallel lane is the intended use. Give each lane its own subsequence (or
sequence, for blocks of 2^127) and the lanes never overlap.

Usage:
    engine = Mrg32k3aEngine(seed=42, subsequence=lane_id)
    values = [engine() for _ in range(1000)]
"""

import logging
from typing import Callable, List, Sequence

from .constants import (
    A12, A13N, A21, A23N, DEFAULT_SEED, M1, M2,
    MASK32, SEED_MASK_HI, SEED_MASK_LO,
)
from .jump import discard_sequence_state, discard_state, discard_subsequence_state
from .modmath import mod_m1, mod_m2, mod_mul_m1, mod_mul_m2
from .state import EngineState, as_count, as_seed

logger = logging.getLogger(__name__)

RestartHook = Callable[[], None]


# ============================================================================
# STATE OPERATIONS
# ============================================================================

def next_state(state: EngineState) -> int:
    """Advance both recurrences one step and return the combined output in [1, M1]."""
    g1 = state.g1
    p = mod_m1(A12 * g1[1] + A13N * (M1 - g1[0]))
    g1 = (g1[1], g1[2], p)

    g2 = state.g2
    p = mod_m2(A21 * g2[2] + A23N * (M2 - g2[0]))
    g2 = (g2[1], g2[2], p)

    state.g1 = g1
    state.g2 = g2

    if g1[2] <= g2[2]:
        return g1[2] - g2[2] + M1
    return g1[2] - g2[2]


def restart_state(state: EngineState, subsequence: int, offset: int,
                  hooks: Sequence[RestartHook] = ()) -> None:
    """Run restart hooks, then skip subsequence blocks and offset steps (in that order)."""
    subsequence = as_count(subsequence, 'subsequence')
    offset = as_count(offset, 'offset')
    for hook in hooks:
        hook()
    discard_subsequence_state(state, subsequence)
    discard_state(state, offset)


def seed_state(state: EngineState, seed_value: int, subsequence: int = 0,
               offset: int = 0, hooks: Sequence[RestartHook] = ()) -> None:
    """Overwrite state from seed_value, then restart at (subsequence, offset)."""
    seed_value = as_seed(seed_value)
    if seed_value == 0:
        logger.debug(f"Seed 0 replaced with default seed {DEFAULT_SEED:#x}")
        seed_value = DEFAULT_SEED

    x = (seed_value & MASK32) ^ SEED_MASK_LO
    y = ((seed_value >> 32) & MASK32) ^ SEED_MASK_HI

    state.g1 = (mod_mul_m1(x, seed_value),
                mod_mul_m1(y, seed_value),
                mod_mul_m1(x, seed_value))
    state.g2 = (mod_mul_m2(y, seed_value),
                mod_mul_m2(x, seed_value),
                mod_mul_m2(y, seed_value))
    restart_state(state, subsequence, offset, hooks)


# ============================================================================
# ENGINE
# ============================================================================

class Mrg32k3aEngine:
    """
    Object wrapper around EngineState.

    Restart hooks run on every seed() and restart(). Sampling layers that
    cache values derived from the stream (see boxmuller.BoxMullerCache)
    register one to drop their cache when the engine is repositioned.
    """

    def __init__(self, seed: int = DEFAULT_SEED, subsequence: int = 0, offset: int = 0):
        self._state = EngineState()
        self._restart_hooks: List[RestartHook] = []
        self.seed(seed, subsequence, offset)

    @classmethod
    def from_config(cls, config) -> 'Mrg32k3aEngine':
        """Build an engine at the absolute position named by an EngineConfig."""
        engine = cls(config.seed, config.subsequence, config.offset)
        engine.discard_sequence(config.sequence)
        return engine

    @property
    def state(self) -> EngineState:
        return self._state

    def add_restart_hook(self, hook: RestartHook) -> None:
        self._restart_hooks.append(hook)

    def seed(self, seed_value: int, subsequence: int = 0, offset: int = 0) -> None:
        seed_state(self._state, seed_value, subsequence, offset, self._restart_hooks)

    def restart(self, subsequence: int, offset: int) -> None:
        logger.debug(f"Restart at subsequence={subsequence} offset={offset}")
        restart_state(self._state, subsequence, offset, self._restart_hooks)

    def discard(self, offset: int) -> None:
        discard_state(self._state, offset)

    def discard_subsequence(self, subsequence: int) -> None:
        discard_subsequence_state(self._state, subsequence)

    def discard_sequence(self, sequence: int) -> None:
        discard_sequence_state(self._state, sequence)

    def next(self) -> int:
        return next_state(self._state)

    __call__ = next

    def copy(self) -> 'Mrg32k3aEngine':
        """Independent engine at the same position. Restart hooks are not copied."""
        clone = self.__class__.__new__(self.__class__)
        clone._state = self._state.copy()
        clone._restart_hooks = []
        return clone

    def __eq__(self, other):
        if not isinstance(other, Mrg32k3aEngine):
            return NotImplemented
        return self._state == other._state

    __hash__ = None

    def __repr__(self):
        return f"Mrg32k3aEngine(g1={self._state.g1}, g2={self._state.g2})"
