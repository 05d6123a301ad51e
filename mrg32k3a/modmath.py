"""
Modular Arithmetic Primitives
=============================

Reduction and multiplication modulo the two MRG32k3a primes without forming
any intermediate wider than 64 bits.

Both moduli have the shape M = 2^32 - c, so 2^32 = c (mod M) and a 64-bit
accumulator folds as

    acc = hi * 2^32 + lo  =  lo + hi * c  (mod M)

mod_m1 / mod_m2 are the fixed-pass variants used by the step recurrence,
where the accumulator is bounded by the recurrence coefficients. reduce_mod
keeps folding until the high word is clear, so it accepts any 64-bit value.
"""

from .constants import M1, M1C, M2, M2C, MASK32, MUL_SPLIT, MUL_SPLIT_BITS

_FOLD_CONSTANTS = {
    M1: M1C,
    M2: M2C,
}


def _fold_constant(m: int) -> int:
    try:
        return _FOLD_CONSTANTS[m]
    except KeyError:
        raise ValueError(f"Unsupported modulus: {m}. Available: {sorted(_FOLD_CONSTANTS)}") from None


def reduce_mod(m: int, accumulator: int) -> int:
    """Reduce a non-negative 64-bit accumulator into [0, m-1]."""
    c = _fold_constant(m)
    if accumulator < 0:
        raise ValueError(f"accumulator must be non-negative, got {accumulator}")

    p = accumulator
    while p >> 32:
        p = (p & MASK32) + (p >> 32) * c
    # p < 2^32 < 2m here
    if p >= m:
        p -= m
    return p


def mod_m1(p: int) -> int:
    """
    Single-fold reduction mod M1.

    Valid for p < 2^32 * 2^23, which covers every product the step
    recurrence and mul_mod hand to it.
    """
    p = (p & MASK32) + (p >> 32) * M1C
    if p >= M1:
        p -= M1
    return p


def mod_m2(p: int) -> int:
    """
    Two-fold reduction mod M2.

    M2C is too large for one fold to land below 2^32, so the result of the
    first fold is folded again before the final subtraction.
    """
    p = (p & MASK32) + (p >> 32) * M2C
    p = (p & MASK32) + (p >> 32) * M2C
    if p >= M2:
        p -= M2
    return p


def mul_mod(m: int, multiplicand: int, multiplier: int) -> int:
    """
    (multiplicand * multiplier) mod m with 64-bit intermediates.

    The multiplicand is truncated to 32 bits and split at bit 17 so that
    each partial product is at most 17 bits times a residue:

        hi = multiplicand >> 17
        lo = multiplicand - hi * 2^17
        result = reduce(reduce(hi * multiplier) * 2^17 + reduce(lo * multiplier))

    A multiplier that is not yet a residue (the raw 64-bit seed during
    seeding) is reduced first.
    """
    multiplicand &= MASK32
    multiplier = reduce_mod(m, multiplier)

    hi = multiplicand >> MUL_SPLIT_BITS
    lo = multiplicand - hi * MUL_SPLIT

    temp1 = reduce_mod(m, hi * multiplier) * MUL_SPLIT
    temp2 = reduce_mod(m, lo * multiplier)
    return reduce_mod(m, temp1 + temp2)


def mod_mul_m1(multiplicand: int, multiplier: int) -> int:
    return mul_mod(M1, multiplicand, multiplier)


def mod_mul_m2(multiplicand: int, multiplier: int) -> int:
    return mul_mod(M2, multiplicand, multiplier)
