"""The Tip5 permutation over F_p, p = 2^64 - 2^32 + 1.

Research / education only. Do NOT use in production.
"""

from .constants import (
    STATE_SIZE, NUM_ROUNDS, NUM_SPLIT_AND_LOOKUP, RATE, CAPACITY, DIGEST_LENGTH,
    LOOKUP_TABLE, MDS_MATRIX_FIRST_COLUMN, MDS_MATRIX_FIRST_ROW, ROUND_CONSTANTS,
    round_constants,
)
from .field import P, add, mul, to_limbs, from_limbs, to_bytes, from_bytes
from .sbox import lookup, lookup_sbox, power_sbox
from .linear import mds_multiply
from .state import State, validate_state
from .registry import Component, ComponentRegistry
from .spec import PermutationSpec, TIP5_SPEC
from .validator import validate_spec
from .builder import Permutation, build_permutation, tip5, round_function, permute
from .hashing import Domain, hash_10, hash_pair

__all__ = [
    "STATE_SIZE",
    "NUM_ROUNDS",
    "NUM_SPLIT_AND_LOOKUP",
    "RATE",
    "CAPACITY",
    "DIGEST_LENGTH",
    "LOOKUP_TABLE",
    "MDS_MATRIX_FIRST_COLUMN",
    "MDS_MATRIX_FIRST_ROW",
    "ROUND_CONSTANTS",
    "round_constants",
    "P",
    "add",
    "mul",
    "to_limbs",
    "from_limbs",
    "to_bytes",
    "from_bytes",
    "lookup",
    "lookup_sbox",
    "power_sbox",
    "mds_multiply",
    "State",
    "validate_state",
    "Component",
    "ComponentRegistry",
    "PermutationSpec",
    "TIP5_SPEC",
    "validate_spec",
    "Permutation",
    "build_permutation",
    "tip5",
    "round_function",
    "permute",
    "Domain",
    "hash_10",
    "hash_pair",
]
