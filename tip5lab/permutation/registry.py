from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .linear import linear_identity, mds_multiply
from .sbox import identity_sbox, lookup_sbox, power_sbox


@dataclass(frozen=True)
class Component:
    """A reusable permutation layer: an element-wise S-box or a state-wide linear map."""
    component_id: str
    kind: str  # SBOX, LINEAR
    description: str
    forward: Callable


def builtin_components() -> Dict[str, Component]:
    comps: Dict[str, Component] = {}
    comps["sbox.split_and_lookup"] = Component(
        component_id="sbox.split_and_lookup",
        kind="SBOX",
        description="Byte-wise lookup on the Montgomery form of the element",
        forward=lookup_sbox,
    )
    comps["sbox.power7"] = Component(
        component_id="sbox.power7",
        kind="SBOX",
        description="Power map x -> x^7",
        forward=power_sbox,
    )
    comps["sbox.identity"] = Component(
        component_id="sbox.identity",
        kind="SBOX",
        description="Identity S-box (no substitution)",
        forward=identity_sbox,
    )
    comps["linear.tip5_mds"] = Component(
        component_id="linear.tip5_mds",
        kind="LINEAR",
        description="16x16 circulant MDS matrix",
        forward=mds_multiply,
    )
    comps["linear.identity"] = Component(
        component_id="linear.identity",
        kind="LINEAR",
        description="Identity linear layer (no diffusion)",
        forward=linear_identity,
    )
    return comps


class ComponentRegistry:
    def __init__(self):
        self._components: Dict[str, Component] = builtin_components()

    def get(self, component_id: str) -> Component:
        if component_id not in self._components:
            raise KeyError(f"Unknown component_id: {component_id}")
        return self._components[component_id]

    def list(self) -> List[Component]:
        return list(self._components.values())

    def list_by_kind(self, kind: str) -> List[Component]:
        kind = kind.upper()
        out = [c for c in self._components.values() if c.kind == kind]
        out.sort(key=lambda c: c.component_id)
        return out

    def exists(self, component_id: str, kind: Optional[str] = None) -> bool:
        comp = self._components.get(component_id)
        if comp is None:
            return False
        return kind is None or comp.kind == kind.upper()

    def register(self, component: Component) -> None:
        self._components[component.component_id] = component
