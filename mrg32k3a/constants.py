"""
MRG32k3a Constants
==================

Fixed parameters of L'Ecuyer's MRG32k3a combined multiple recursive
generator. Both moduli are primes of the form 2^32 - c, which is what the
folding reduction in modmath.py relies on.
"""

# ============================================================================
# WORD SIZES
# ============================================================================

POW32 = 1 << 32
MASK32 = POW32 - 1
MASK64 = (1 << 64) - 1

# ============================================================================
# MODULI
# ============================================================================

M1 = 4294967087
M1C = 209           # M1 = 2^32 - M1C
M2 = 4294944443
M2C = 22853         # M2 = 2^32 - M2C

# ============================================================================
# RECURRENCE COEFFICIENTS
# ============================================================================
# x1[n] = (A12 * x1[n-2] - A13N * x1[n-3]) mod M1
# x2[n] = (A21 * x2[n-1] - A23N * x2[n-3]) mod M2

A12 = 1403580
A13N = 810728
A13 = M1 - A13N
A21 = 527612
A23N = 1370589
A23 = M2 - A23N

# ============================================================================
# SEEDING
# ============================================================================

DEFAULT_SEED = 0x12345
SEED_MASK_LO = 0x55555555
SEED_MASK_HI = 0xAAAAAAAA

# mul_mod splits its 32-bit multiplicand at bit 17
MUL_SPLIT_BITS = 17
MUL_SPLIT = 1 << MUL_SPLIT_BITS     # 131072

# ============================================================================
# JUMP DISTANCES
# ============================================================================

SUBSEQUENCE_LOG2 = 67
SEQUENCE_LOG2 = 127
SUBSEQUENCE_LENGTH = 1 << SUBSEQUENCE_LOG2
SEQUENCE_LENGTH = 1 << SEQUENCE_LOG2
