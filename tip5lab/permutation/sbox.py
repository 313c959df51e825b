"""Nonlinear layer: the byte lookup table and the two field S-boxes.

Research / education only. Do NOT use in production.
"""

from __future__ import annotations

from . import field
from .constants import LOOKUP_TABLE, POWER_SBOX_EXPONENT


def offset_fermat_cube_map(b: int) -> int:
    """b -> (b + 1)^3 mod 257 - 1, the generator of LOOKUP_TABLE."""
    return pow(b + 1, 3, 257) - 1


def lookup(b: int) -> int:
    """Substitute one byte through the fixed 256-entry bijection."""
    if not 0 <= b <= 0xFF:
        raise ValueError(f"byte out of range: {b}")
    return LOOKUP_TABLE[b]


def lookup_sbox(a: int) -> int:
    """Split-and-lookup S-box.

    The element's Montgomery form is split into two 32-bit limbs and each
    limb into four bytes; every byte goes through the lookup table and the
    limbs and element are reassembled. Since the table fixes 0x00 and 0xFF,
    the substituted value is always canonical.
    """
    hi, lo = field.to_limbs(field.to_montgomery(a))
    hi = field.from_bytes(*(LOOKUP_TABLE[b] for b in field.to_bytes(hi)))
    lo = field.from_bytes(*(LOOKUP_TABLE[b] for b in field.to_bytes(lo)))
    return field.from_montgomery(field.from_limbs(hi, lo))


def power_sbox(a: int) -> int:
    """a^7 mod p."""
    return pow(a, POWER_SBOX_EXPONENT, field.P)


def identity_sbox(a: int) -> int:
    """No substitution. Only useful for reduced-strength experiments."""
    return a

