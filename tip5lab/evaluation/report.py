"""Structured evaluation report builder.

Aggregates diffusion, lookup-table and linear-layer analysis plus the
reference vectors into a single serializable report.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .diffusion import DiffusionResult
from .linear_analysis import LinearAnalysisResult
from .sbox_analysis import SBoxAnalysisResult


@dataclass
class EvaluationReport:
    """Complete evaluation report for one permutation spec."""
    permutation_name: str = ""
    timestamp: str = ""
    diffusion: Optional[DiffusionResult] = None
    sbox: Optional[SBoxAnalysisResult] = None
    linear: Optional[LinearAnalysisResult] = None
    vectors: Dict[str, List[int]] = field(default_factory=dict)

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).isoformat()

    def issues(self) -> List[str]:
        issues: List[str] = []
        if self.diffusion is not None and not self.diffusion.full_diffusion:
            issues.append(
                f"Single-position changes reached only {self.diffusion.min_changed_outputs} output elements."
            )
        if self.sbox is not None and not self.sbox.is_bijective:
            issues.append("Lookup table is not a bijection.")
        if self.linear is not None and not self.linear.all_entries_nonzero:
            issues.append("Linear layer matrix has zero entries; one round cannot reach every position.")
        return issues

    def to_dict(self) -> Dict[str, Any]:
        """Serialize full report for JSON export."""
        return {
            "permutation": self.permutation_name,
            "timestamp": self.timestamp,
            "diffusion": self.diffusion.to_dict() if self.diffusion else None,
            "sbox": self.sbox.to_dict() if self.sbox else None,
            "linear": self.linear.to_dict() if self.linear else None,
            "vectors": {k: [str(x) for x in v] for k, v in self.vectors.items()},
            "issues": self.issues(),
        }

    def to_summary(self) -> str:
        lines = [f"Evaluation Report: {self.permutation_name} ({self.timestamp})", "=" * 50]
        if self.diffusion:
            lines.append(f"  {self.diffusion.summary()}")
        if self.sbox:
            lines.append(f"  {self.sbox.summary()}")
        if self.linear:
            lines.append(f"  {self.linear.summary()}")
        for name, vec in self.vectors.items():
            lines.append(f"  {name}: [{', '.join(str(x) for x in vec)}]")
        issues = self.issues()
        if issues:
            lines.append("Issues: " + "; ".join(issues))
        return "\n".join(lines)
