from __future__ import annotations

from typing import List, Tuple

from .constants import STATE_SIZE
from .registry import ComponentRegistry
from .spec import PermutationSpec

_STAGE_KINDS = {
    "lookup_sbox": "SBOX",
    "power_sbox": "SBOX",
    "linear": "LINEAR",
}


def validate_spec(spec: PermutationSpec, registry: ComponentRegistry | None = None) -> Tuple[bool, List[str]]:
    reg = registry or ComponentRegistry()
    errs: List[str] = []

    # The constant tables and the MDS matrix are 16 wide
    if spec.state_size != STATE_SIZE:
        errs.append(f"state_size must be {STATE_SIZE}, got {spec.state_size}")
    if spec.num_split_and_lookup > spec.state_size:
        errs.append("num_split_and_lookup cannot exceed state_size")
    if not spec.round_order:
        errs.append("round_order must contain at least one round")

    for stage, kind in _STAGE_KINDS.items():
        if stage not in spec.components:
            errs.append(f"Missing component: {stage}")
            continue
        cid = spec.components[stage]
        if not reg.exists(cid):
            errs.append(f"Unknown component {stage}: {cid}")
        elif not reg.exists(cid, kind):
            errs.append(f"Component {cid} is not a {kind} component (stage {stage})")

    for stage in spec.components:
        if stage not in _STAGE_KINDS:
            errs.append(f"Unexpected stage: {stage}")

    return (len(errs) == 0), errs
