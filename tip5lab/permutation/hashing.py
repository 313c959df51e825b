"""Single-call compression on top of the permutation.

Only fixed-length inputs are handled here: exactly RATE elements are
placed in the rate part of a domain-separated state, the permutation runs
once, and the first DIGEST_LENGTH outputs are the digest. Variable-length
absorption is left to callers.

Research / education only. Do NOT use in production.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Sequence

from .builder import permute
from .constants import CAPACITY, DIGEST_LENGTH, RATE
from .state import validate_elements


class Domain(str, Enum):
    FIXED_LENGTH = "FIXED_LENGTH"
    VARIABLE_LENGTH = "VARIABLE_LENGTH"


def capacity_padding(domain: Domain) -> List[int]:
    """Capacity fill: all ones for fixed-length input, all zeros otherwise."""
    if domain == Domain.FIXED_LENGTH:
        return [1] * CAPACITY
    return [0] * CAPACITY


def initial_state(domain: Domain, rate: Sequence[int] | None = None) -> List[int]:
    """rate elements (zeros if omitted) followed by the domain's capacity padding."""
    head = [0] * RATE if rate is None else validate_elements(rate, RATE)
    return head + capacity_padding(domain)


def hash_10(inputs: Sequence[int]) -> List[int]:
    """Compress exactly 10 field elements into a 5-element digest."""
    state = permute(initial_state(Domain.FIXED_LENGTH, inputs))
    return state[:DIGEST_LENGTH]


def hash_pair(left: Sequence[int], right: Sequence[int]) -> List[int]:
    """Compress two digests into one, e.g. for a Merkle tree node."""
    left = validate_elements(left, DIGEST_LENGTH)
    right = validate_elements(right, DIGEST_LENGTH)
    return hash_10(left + right)
