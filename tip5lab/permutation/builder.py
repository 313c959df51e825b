from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, List, Sequence

from .constants import round_constants
from .field import P
from .registry import ComponentRegistry
from .spec import TIP5_SPEC, PermutationSpec
from .state import validate_state
from .validator import validate_spec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Permutation:
    """A built permutation. Holds no per-call state; safe to share across threads."""
    spec: PermutationSpec
    lookup_sbox: Callable[[int], int]
    power_sbox: Callable[[int], int]
    linear: Callable[[Sequence[int]], List[int]]

    def sbox_layer(self, state: Sequence[int]) -> List[int]:
        k = self.spec.num_split_and_lookup
        return [self.lookup_sbox(x) if i < k else self.power_sbox(x) for i, x in enumerate(state)]

    def round_function(self, state: Sequence[int], round_index: int) -> List[int]:
        """S-box layer, then linear layer, then the constants of `round_index`."""
        constants = round_constants(round_index)
        state = self.sbox_layer(state)
        state = self.linear(state)
        return [(x + c) % P for x, c in zip(state, constants, strict=True)]

    def permute(self, elements: Sequence[int]) -> List[int]:
        """Run every round of spec.round_order on a validated copy of `elements`."""
        state = validate_state(elements)
        for r in self.spec.round_order:
            state = self.round_function(state, r)
        return state


def build_permutation(spec: PermutationSpec, registry: ComponentRegistry | None = None) -> Permutation:
    reg = registry or ComponentRegistry()
    ok, errs = validate_spec(spec, reg)
    if not ok:
        raise ValueError(f"Invalid permutation spec {spec.name!r}: " + "; ".join(errs))

    perm = Permutation(
        spec=spec,
        lookup_sbox=reg.get(spec.components["lookup_sbox"]).forward,
        power_sbox=reg.get(spec.components["power_sbox"]).forward,
        linear=reg.get(spec.components["linear"]).forward,
    )
    logger.debug(
        "Built permutation %s: rounds=%s split=%d components=%s",
        spec.name, spec.round_order, spec.num_split_and_lookup, spec.components,
    )
    return perm


@lru_cache(maxsize=1)
def tip5() -> Permutation:
    """The standard Tip5 permutation, built once per process."""
    return build_permutation(TIP5_SPEC)


def round_function(state: Sequence[int], round_index: int) -> List[int]:
    return tip5().round_function(validate_state(state), round_index)


def permute(elements: Sequence[int]) -> List[int]:
    """Tip5 permutation of 16 field elements. Position 0 is the first element in and out."""
    return tip5().permute(elements)
