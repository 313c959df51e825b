"""Linear layer: multiplication by the 16x16 circulant MDS matrix.

Research / education only. Do NOT use in production.
"""

from __future__ import annotations

from typing import List, Sequence

from .constants import MDS_MATRIX_FIRST_ROW, STATE_SIZE
from .field import P


def circulant_multiply(state: Sequence[int], first_row: Sequence[int]) -> List[int]:
    """out[i] = sum_j first_row[(j - i) % n] * state[j]  (mod p).

    Products are accumulated as Python ints and reduced once per output
    position; nothing is observed before the reduction.
    """
    n = len(first_row)
    if len(state) != n:
        raise ValueError(f"circulant_multiply requires a {n}-element state, got {len(state)}")
    out = []
    for i in range(n):
        acc = 0
        for j in range(n):
            acc += first_row[(j - i) % n] * state[j]
        out.append(acc % P)
    return out


def mds_multiply(state: Sequence[int]) -> List[int]:
    """Tip5 MDS diffusion layer over the full 16-element state."""
    return circulant_multiply(state, MDS_MATRIX_FIRST_ROW)


def linear_identity(state: Sequence[int]) -> List[int]:
    """Identity linear layer (no diffusion)."""
    if len(state) != STATE_SIZE:
        raise ValueError(f"linear_identity requires a {STATE_SIZE}-element state")
    return list(state)


def matrix_of(linear, size: int = STATE_SIZE) -> List[List[int]]:
    """Recover the matrix of a linear layer by applying it to the standard basis.

    Returns rows: matrix[i][j] is output position i of basis vector e_j.
    """
    columns = []
    for j in range(size):
        e = [0] * size
        e[j] = 1
        columns.append(linear(e))
    return [[columns[j][i] for j in range(size)] for i in range(size)]
