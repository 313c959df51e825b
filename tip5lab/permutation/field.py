"""Arithmetic over the prime field F_p with p = 2^64 - 2^32 + 1.

Elements are plain Python ints kept in canonical range [0, p). The module
also exposes the limb/byte decompositions and the Montgomery form used by
the split-and-lookup S-box.

Research / education only. Do NOT use in production.
"""

from __future__ import annotations

from typing import Tuple

P: int = (1 << 64) - (1 << 32) + 1

# Montgomery radix R = 2^64, reduced mod p
MONTGOMERY_R: int = (1 << 64) % P
MONTGOMERY_R_INV: int = pow(MONTGOMERY_R, -1, P)

LIMB_MASK = 0xFFFFFFFF


def is_canonical(a: int) -> bool:
    """True if a is an int (not bool) in [0, p)."""
    return isinstance(a, int) and not isinstance(a, bool) and 0 <= a < P


def _check(a: int) -> int:
    if not is_canonical(a):
        raise ValueError(f"not a canonical field element: {a!r}")
    return a


def add(a: int, b: int) -> int:
    return (a + b) % P


def sub(a: int, b: int) -> int:
    return (a - b) % P


def neg(a: int) -> int:
    return (-a) % P


def mul(a: int, b: int) -> int:
    return (a * b) % P


def power(a: int, e: int) -> int:
    if e < 0:
        raise ValueError("negative exponent")
    return pow(a, e, P)


def inverse(a: int) -> int:
    if a % P == 0:
        raise ZeroDivisionError("zero has no inverse in F_p")
    return pow(a, P - 2, P)


# ============================================================================
# LIMB / BYTE DECOMPOSITION
# ============================================================================

def to_limbs(a: int) -> Tuple[int, int]:
    """Split a field element into its big-endian 32-bit halves (hi, lo)."""
    _check(a)
    return a >> 32, a & LIMB_MASK


def from_limbs(hi: int, lo: int) -> int:
    """Inverse of to_limbs. Rejects limbs that do not form a canonical element."""
    if not (0 <= hi <= LIMB_MASK and 0 <= lo <= LIMB_MASK):
        raise ValueError(f"limbs out of 32-bit range: ({hi}, {lo})")
    return _check((hi << 32) | lo)


def to_bytes(limb: int) -> Tuple[int, int, int, int]:
    """Decompose a 32-bit limb into four bytes, most significant first."""
    if not 0 <= limb <= LIMB_MASK:
        raise ValueError(f"limb out of 32-bit range: {limb}")
    return (limb >> 24) & 0xFF, (limb >> 16) & 0xFF, (limb >> 8) & 0xFF, limb & 0xFF


def from_bytes(b0: int, b1: int, b2: int, b3: int) -> int:
    """Recompose a 32-bit limb base-256 from four bytes, most significant first."""
    limb = 0
    for b in (b0, b1, b2, b3):
        if not 0 <= b <= 0xFF:
            raise ValueError(f"byte out of range: {b}")
        limb = limb * 256 + b
    return limb


# ============================================================================
# MONTGOMERY FORM
# ============================================================================

def to_montgomery(a: int) -> int:
    """Return a * 2^64 mod p."""
    return (_check(a) * MONTGOMERY_R) % P


def from_montgomery(m: int) -> int:
    """Return m * 2^-64 mod p. Exact inverse of to_montgomery."""
    return (_check(m) * MONTGOMERY_R_INV) % P
