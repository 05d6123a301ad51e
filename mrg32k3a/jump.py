"""
Jump-Ahead by Matrix Exponentiation
===================================

Each MRG32k3a component is an order-3 linear recurrence, so one step is the
product of a 3x3 companion matrix with the state window:

    [s1]   [ 0    1    0 ] [s0]          [s1]   [ 0    1   0  ] [s0]
    [s2] = [ 0    0    1 ] [s1]          [s2] = [ 0    0   1  ] [s1]
    [p1]   [A13  A12   0 ] [s2]  mod M1  [p2]   [A23   0  A21 ] [s2]  mod M2

Advancing by n steps multiplies by the n-th power of that matrix, which
binary exponentiation computes in O(log n) squarings. The same loop serves
single-step skips (companion matrices), subsequence skips (2^67 steps) and
sequence skips (2^127 steps); only the starting matrix pair differs.

Matrices are numpy uint64 arrays indexed [row, col]. Every entry is a
residue below 2^32, so each product fits in 64 bits and is reduced before
the next accumulation.
"""

from typing import Sequence

import numpy as np

from .constants import A12, A13, A21, A23, M1, M2
from .state import EngineState, as_count


# ============================================================================
# MATRIX KERNELS
# ============================================================================

def as_matrix(rows: Sequence[Sequence[int]]) -> np.ndarray:
    """Build a read-only 3x3 uint64 matrix."""
    matrix = np.array(rows, dtype=np.uint64)
    if matrix.shape != (3, 3):
        raise ValueError(f"Jump matrices are 3x3, got shape {matrix.shape}")
    matrix.setflags(write=False)
    return matrix


def mod_mat_vec(a: np.ndarray, s: np.ndarray, m: int) -> np.ndarray:
    """Return a @ s mod m, reducing after every multiply-accumulate."""
    m = np.uint64(m)
    s = np.asarray(s, dtype=np.uint64)
    x = np.zeros(3, dtype=np.uint64)
    for j in range(3):
        x = (a[:, j] * s[j] + x) % m
    return x


def mod_mat_mul(a: np.ndarray, b: np.ndarray, m: int) -> np.ndarray:
    """Return a @ b mod m."""
    m = np.uint64(m)
    x = np.zeros((3, 3), dtype=np.uint64)
    for k in range(3):
        x = (x + np.multiply.outer(a[:, k], b[k, :]) % m) % m
    return x


def mod_mat_sq(a: np.ndarray, m: int) -> np.ndarray:
    """Return a @ a mod m."""
    return mod_mat_mul(a, a, m)


def matrix_power(a: np.ndarray, n: int, m: int) -> np.ndarray:
    """Return a^n mod m (identity for n == 0)."""
    n = as_count(n, 'n')
    result = np.identity(3, dtype=np.uint64)
    base = np.array(a, dtype=np.uint64)
    while n > 0:
        if n & 1:
            result = mod_mat_mul(base, result, m)
        n >>= 1
        if n:
            base = mod_mat_sq(base, m)
    return result


# ============================================================================
# JUMP TABLES
# ============================================================================

COMPANION_M1 = as_matrix([
    [0, 1, 0],
    [0, 0, 1],
    [A13, A12, 0],
])
COMPANION_M2 = as_matrix([
    [0, 1, 0],
    [0, 0, 1],
    [A23, 0, A21],
])

# Companion matrices raised to 2^127
SEQUENCE_JUMP_M1 = as_matrix([
    [2427906178, 3580155704, 949770784],
    [226153695, 1230515664, 3580155704],
    [1988835001, 986791581, 1230515664],
])
SEQUENCE_JUMP_M2 = as_matrix([
    [1464411153, 277697599, 1610723613],
    [32183930, 1464411153, 1022607788],
    [2824425944, 32183930, 2093834863],
])

# Companion matrices raised to 2^67
SUBSEQUENCE_JUMP_M1 = as_matrix([
    [3894793123, 921712152, 596236860],
    [4038673596, 4279784147, 921712152],
    [1999065039, 859801225, 4279784147],
])
SUBSEQUENCE_JUMP_M2 = as_matrix([
    [613698149, 3416334823, 3832821180],
    [1308958254, 613698149, 1338381534],
    [4058246217, 1308958254, 2070907998],
])


# ============================================================================
# STATE JUMPS
# ============================================================================

def jump_state(state: EngineState, count: int,
               a1: np.ndarray, a2: np.ndarray) -> None:
    """
    Advance state in place by count applications of the (a1, a2) pair.

    Double-and-add: apply the current matrix when the low bit of count is
    set, then halve count and square the matrix. No outputs are produced.
    """
    count = as_count(count)
    if count == 0:
        return

    a1 = np.array(a1, dtype=np.uint64)
    a2 = np.array(a2, dtype=np.uint64)
    s1 = np.array(state.g1, dtype=np.uint64)
    s2 = np.array(state.g2, dtype=np.uint64)

    while count > 0:
        if count & 1:
            s1 = mod_mat_vec(a1, s1, M1)
            s2 = mod_mat_vec(a2, s2, M2)
        count >>= 1
        if count:
            a1 = mod_mat_sq(a1, M1)
            a2 = mod_mat_sq(a2, M2)

    state.g1 = tuple(int(v) for v in s1)
    state.g2 = tuple(int(v) for v in s2)


def discard_state(state: EngineState, offset: int) -> None:
    """Skip offset single steps."""
    jump_state(state, offset, COMPANION_M1, COMPANION_M2)


def discard_subsequence_state(state: EngineState, subsequence: int) -> None:
    """Skip subsequence blocks of 2^67 steps."""
    jump_state(state, subsequence, SUBSEQUENCE_JUMP_M1, SUBSEQUENCE_JUMP_M2)


def discard_sequence_state(state: EngineState, sequence: int) -> None:
    """Skip sequence blocks of 2^127 steps."""
    jump_state(state, sequence, SEQUENCE_JUMP_M1, SEQUENCE_JUMP_M2)
