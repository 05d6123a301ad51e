"""
Engine state and input coercion shared by the engine, jump and api modules.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .constants import M1, M2, MASK64

Triple = Tuple[int, int, int]


@dataclass
class EngineState:
    """
    The two three-value windows of the MRG32k3a recurrences.

    g1 holds residues mod M1, g2 residues mod M2. Index 2 is the most
    recently produced value, index 0 the oldest one still needed.
    """
    g1: Triple = (0, 0, 0)
    g2: Triple = (0, 0, 0)

    def copy(self) -> 'EngineState':
        return EngineState(self.g1, self.g2)

    def is_reduced(self) -> bool:
        """True when every residue lies in [0, M-1] for its modulus."""
        return (all(0 <= v < M1 for v in self.g1)
                and all(0 <= v < M2 for v in self.g2))


def as_count(value, name: str = 'count') -> int:
    """Validate a skip count: any non-negative integer."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    value = int(value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def as_seed(value) -> int:
    """Coerce a seed to unsigned 64 bits, wrapping like a C conversion."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"seed must be an integer, got {type(value).__name__}")
    return int(value) & MASK64
