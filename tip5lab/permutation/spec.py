from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .constants import NUM_ROUNDS, NUM_SPLIT_AND_LOOKUP, STATE_SIZE


def default_components() -> Dict[str, str]:
    return {
        "lookup_sbox": "sbox.split_and_lookup",
        "power_sbox": "sbox.power7",
        "linear": "linear.tip5_mds",
    }


class PermutationSpec(BaseModel):
    """Declarative description of a Tip5-style permutation instance.

    The default values describe Tip5 itself. Other values exist so that
    reduced or rearranged variants can be built and compared against it.
    """

    name: str = Field(default="Tip5", min_length=1, max_length=80)
    state_size: int = Field(default=STATE_SIZE, ge=1)
    num_split_and_lookup: int = Field(default=NUM_SPLIT_AND_LOOKUP, ge=0)

    # Round indices in execution order; each index selects its own constant set
    round_order: List[int] = Field(default_factory=lambda: list(range(NUM_ROUNDS)))

    # Map stage -> component_id (registered in ComponentRegistry)
    components: Dict[str, str] = Field(default_factory=default_components)

    notes: Optional[str] = Field(default=None, max_length=2000)

    @field_validator("round_order")
    @classmethod
    def _round_indices(cls, v: List[int]) -> List[int]:
        for r in v:
            if not 0 <= r < NUM_ROUNDS:
                raise ValueError(f"round index {r} outside [0, {NUM_ROUNDS})")
        return v

    @property
    def rounds(self) -> int:
        return len(self.round_order)


TIP5_SPEC = PermutationSpec()
