from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from tip5lab.config import Settings, load_settings
from tip5lab.permutation.builder import Permutation, build_permutation
from tip5lab.permutation.constants import LOOKUP_TABLE, STATE_SIZE
from tip5lab.permutation.hashing import Domain, initial_state
from tip5lab.permutation.registry import ComponentRegistry
from tip5lab.permutation.spec import TIP5_SPEC, PermutationSpec

from .diffusion import compute_diffusion
from .linear_analysis import analyze_linear_layer
from .report import EvaluationReport
from .sbox_analysis import analyze_lookup_table

logger = logging.getLogger(__name__)


def reference_vectors(perm: Permutation) -> Dict[str, List[int]]:
    """Outputs of `perm` on the fixed inputs used as regression vectors."""
    return {
        "permute_zeros": perm.permute([0] * STATE_SIZE),
        "permute_0_to_15": perm.permute(list(range(STATE_SIZE))),
        "permute_fixed_length_1_to_10": perm.permute(
            initial_state(Domain.FIXED_LENGTH, list(range(1, 11)))
        ),
    }


def evaluate_permutation(
    spec: PermutationSpec = TIP5_SPEC,
    *,
    settings: Optional[Settings] = None,
    registry: Optional[ComponentRegistry] = None,
    progress_callback: Optional[Callable[[str, int, int], None]] = None,
) -> EvaluationReport:
    """Run diffusion, lookup-table and linear-layer analysis for `spec`.

    Args:
        spec: Permutation specification to evaluate.
        settings: Evaluation settings; loaded from the environment if omitted.
        registry: Optional component registry.
        progress_callback: Optional callback(stage, current, total).

    Returns:
        EvaluationReport with all results and the reference vectors.
    """
    cfg = settings or load_settings()
    reg = registry or ComponentRegistry()
    perm = build_permutation(spec, reg)
    stages = 3 if cfg.run_sbox_analysis else 2

    logger.info("Evaluating %s (trials=%d, seed=%d)", spec.name, cfg.diffusion_trials, cfg.global_seed)

    if progress_callback:
        progress_callback("diffusion", 0, stages)
    diffusion = compute_diffusion(perm, trials=cfg.diffusion_trials, seed=cfg.global_seed)

    if progress_callback:
        progress_callback("linear", 1, stages)
    linear_id = spec.components["linear"]
    linear = analyze_linear_layer(reg.get(linear_id).forward, component_id=linear_id)

    sbox = None
    if cfg.run_sbox_analysis:
        if progress_callback:
            progress_callback("sbox", 2, stages)
        sbox = analyze_lookup_table(LOOKUP_TABLE)

    report = EvaluationReport(
        permutation_name=spec.name,
        diffusion=diffusion,
        sbox=sbox,
        linear=linear,
        vectors=reference_vectors(perm),
    )
    for issue in report.issues():
        logger.warning("%s: %s", spec.name, issue)
    logger.debug("Evaluation of %s finished", spec.name)
    return report
