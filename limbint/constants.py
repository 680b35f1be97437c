"""Limb layout constants for the numeric engine.

Values are stored as little-endian lists of unsigned 32-bit limbs. Python
ints serve as the 64-bit accumulators for carries and partial products.
"""

# =============================================================================
# Limb layout
# =============================================================================

LIMB_BITS = 32
BASE = 1 << LIMB_BITS
MASK = BASE - 1
SIGN_BIT = 1 << (LIMB_BITS - 1)

# =============================================================================
# Decimal conversion
# =============================================================================

# 10^9 < 2^32, so any 9-digit chunk fits in a single limb
DECIMAL_CHUNK_DIGITS = 9
DECIMAL_CHUNK_BASE = 10**DECIMAL_CHUNK_DIGITS
POWERS_OF_TEN = tuple(10**i for i in range(DECIMAL_CHUNK_DIGITS + 1))
