#!/usr/bin/env python3
"""
Modular reduction and multiplication tests.

Every primitive is checked against Python's exact % on boundary values and
on a fixed pseudo-random sample of the input range each one is used on.
"""

import random
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mrg32k3a.constants import A12, A13N, A21, A23N, M1, M2, MASK32, MASK64
from mrg32k3a.modmath import mod_m1, mod_m2, mod_mul_m1, mod_mul_m2, mul_mod, reduce_mod

BOUNDARY_VALUES = [
    0, 1, M2 - 1, M2, M1 - 1, M1, MASK32, MASK32 + 1,
    2 * M1 - 1, 2 * M1, 1 << 47, 1 << 63, MASK64,
]


class TestReduceMod:
    """reduce_mod accepts any 64-bit accumulator."""

    @pytest.mark.parametrize("m", [M1, M2])
    @pytest.mark.parametrize("value", BOUNDARY_VALUES)
    def test_boundaries(self, m, value):
        assert reduce_mod(m, value) == value % m

    @pytest.mark.parametrize("m", [M1, M2])
    def test_random_64bit(self, m):
        rng = random.Random(1234)
        for _ in range(2000):
            value = rng.getrandbits(64)
            assert reduce_mod(m, value) == value % m

    def test_unknown_modulus_rejected(self):
        with pytest.raises(ValueError, match="Unsupported modulus"):
            reduce_mod(97, 5)

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            reduce_mod(M1, -1)


class TestFixedPassReduction:
    """mod_m1 / mod_m2 over the accumulators the step recurrence produces."""

    def test_mod_m1_extremes(self):
        largest = A12 * (M1 - 1) + A13N * M1
        for value in (0, M1 - 1, M1, largest):
            assert mod_m1(value) == value % M1

    def test_mod_m2_extremes(self):
        largest = A21 * (M2 - 1) + A23N * M2
        for value in (0, M2 - 1, M2, largest):
            assert mod_m2(value) == value % M2

    def test_random_recurrence_accumulators(self):
        rng = random.Random(99)
        for _ in range(2000):
            a, b = rng.randrange(M1), rng.randrange(M1)
            p = A12 * a + A13N * (M1 - b)
            assert mod_m1(p) == p % M1

            c, d = rng.randrange(M2), rng.randrange(M2)
            p = A21 * c + A23N * (M2 - d)
            assert mod_m2(p) == p % M2


class TestMulMod:
    """mul_mod splits the multiplicand at bit 17 and recombines."""

    @pytest.mark.parametrize("m", [M1, M2])
    @pytest.mark.parametrize("multiplicand", [0, 1, (1 << 17) - 1, 1 << 17, MASK32])
    @pytest.mark.parametrize("multiplier", [0, 1, M2 - 1, M1 - 1])
    def test_boundaries(self, m, multiplicand, multiplier):
        assert mul_mod(m, multiplicand, multiplier) == multiplicand * multiplier % m

    def test_seed_sized_multiplier(self):
        """The raw 64-bit seed is a valid multiplier."""
        rng = random.Random(7)
        for _ in range(500):
            x = rng.getrandbits(32)
            seed = rng.getrandbits(64)
            assert mod_mul_m1(x, seed) == x * seed % M1
            assert mod_mul_m2(x, seed) == x * seed % M2

    def test_multiplicand_truncated_to_32_bits(self):
        assert mod_mul_m1((1 << 32) + 5, 3) == 15

    def test_results_always_reduced(self):
        rng = random.Random(2024)
        for _ in range(500):
            x = rng.getrandbits(32)
            y = rng.getrandbits(64)
            assert 0 <= mod_mul_m1(x, y) < M1
            assert 0 <= mod_mul_m2(x, y) < M2
