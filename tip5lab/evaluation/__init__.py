"""Evaluation tooling for the permutation: diffusion, lookup-table and
linear-layer analysis, aggregated into a serializable report.

Research / education only. Do NOT use in production.
"""

from .diffusion import DiffusionResult, compute_diffusion
from .sbox_analysis import SBoxAnalysisResult, analyze_lookup_table, ddt_max, lat_max_abs
from .linear_analysis import LinearAnalysisResult, analyze_linear_layer, is_circulant
from .report import EvaluationReport
from .runner import evaluate_permutation, reference_vectors

__all__ = [
    "DiffusionResult",
    "compute_diffusion",
    "SBoxAnalysisResult",
    "analyze_lookup_table",
    "ddt_max",
    "lat_max_abs",
    "LinearAnalysisResult",
    "analyze_linear_layer",
    "is_circulant",
    "EvaluationReport",
    "evaluate_permutation",
    "reference_vectors",
]
