"""Differential and linear analysis of the 8-bit lookup table.

XOR-differential and linear properties are reported for reference. The
table is designed to be nonlinear over F_p rather than over GF(2)^8, and
it maps b to 255 - L(b) when b maps to L(b), so its XOR DDT is maximal.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List, Sequence

import numpy as np

from tip5lab.permutation.constants import LOOKUP_TABLE
from tip5lab.permutation.sbox import offset_fermat_cube_map


@dataclass
class SBoxAnalysisResult:
    """Structured result of lookup-table analysis."""
    table_name: str
    sbox_size: int
    is_bijective: bool
    fixed_points: List[int] = field(default_factory=list)
    ddt_max: int = 0            # Max XOR-DDT entry for dx != 0
    lat_max_abs: int = 0        # Max |Walsh coefficient| for non-zero masks
    matches_cube_map: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        bij = "bijective" if self.is_bijective else "NOT bijective"
        return (
            f"{self.table_name} ({self.sbox_size}-entry): "
            f"DDT_max={self.ddt_max}, LAT_max={self.lat_max_abs}, "
            f"fixed_points={self.fixed_points}, {bij}"
        )


def _as_array(table: Sequence[int]) -> np.ndarray:
    t = np.asarray(table, dtype=np.int64)
    if t.shape != (256,):
        raise ValueError("table must have 256 entries")
    if t.min() < 0 or t.max() > 255:
        raise ValueError("table entries must be bytes")
    return t


def ddt_max(table: Sequence[int]) -> int:
    """Return max entry in the XOR DDT excluding dx=0 (counts, not probabilities)."""
    t = _as_array(table)
    x = np.arange(256)
    best = 0
    for dx in range(1, 256):
        dy = t ^ t[x ^ dx]
        best = max(best, int(np.bincount(dy, minlength=256).max()))
    return best


def _parity_table() -> np.ndarray:
    """parity[m, x] = popcount(m & x) mod 2."""
    m = np.arange(256, dtype=np.uint8)
    anded = m[:, None] & m[None, :]
    return (np.unpackbits(anded[..., None], axis=-1).sum(axis=-1) % 2).astype(np.int64)


def lat_max_abs(table: Sequence[int]) -> int:
    """Return max |sum_x (-1)^(a.x xor b.S(x))| over non-zero masks a, b."""
    t = _as_array(table)
    parity = _parity_table()
    signs_in = 1 - 2 * parity              # [a, x]
    signs_out = 1 - 2 * parity[:, t]       # [b, x]
    walsh = signs_in @ signs_out.T         # [a, b]
    return int(np.abs(walsh[1:, 1:]).max())


def analyze_lookup_table(table: Sequence[int] = LOOKUP_TABLE, *, table_name: str = "tip5.lookup") -> SBoxAnalysisResult:
    t = _as_array(table)
    return SBoxAnalysisResult(
        table_name=table_name,
        sbox_size=len(t),
        is_bijective=len(set(t.tolist())) == len(t),
        fixed_points=[int(i) for i in np.nonzero(t == np.arange(256))[0]],
        ddt_max=ddt_max(t),
        lat_max_abs=lat_max_abs(t),
        matches_cube_map=all(int(t[b]) == offset_fermat_cube_map(b) for b in range(256)),
    )
