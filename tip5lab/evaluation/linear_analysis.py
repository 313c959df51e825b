"""Recover and check the matrix of a linear layer from its action on basis vectors."""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Callable, Dict, List, Sequence

from tip5lab.permutation.constants import STATE_SIZE
from tip5lab.permutation.linear import matrix_of


@dataclass
class LinearAnalysisResult:
    component_id: str
    matrix: List[List[int]] = field(default_factory=list)
    is_circulant: bool = False
    first_row: List[int] = field(default_factory=list)
    first_column: List[int] = field(default_factory=list)
    all_entries_nonzero: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        kind = "circulant" if self.is_circulant else "non-circulant"
        dense = "dense" if self.all_entries_nonzero else "sparse"
        return f"{self.component_id}: {len(self.matrix)}x{len(self.matrix)} {kind}, {dense}"


def is_circulant(matrix: Sequence[Sequence[int]]) -> bool:
    """Row i equals row 0 cyclically shifted right by i."""
    n = len(matrix)
    return all(matrix[i][j] == matrix[0][(j - i) % n] for i in range(n) for j in range(n))


def analyze_linear_layer(linear: Callable, *, component_id: str = "linear", size: int = STATE_SIZE) -> LinearAnalysisResult:
    m = matrix_of(linear, size)
    return LinearAnalysisResult(
        component_id=component_id,
        matrix=m,
        is_circulant=is_circulant(m),
        first_row=list(m[0]),
        first_column=[row[0] for row in m],
        all_entries_nonzero=all(v != 0 for row in m for v in row),
    )
