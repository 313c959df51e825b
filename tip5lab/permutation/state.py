"""Boundary validation for permutation input.

A State is exactly STATE_SIZE strict ints in [0, p). Anything else is a
precondition violation and is rejected rather than reduced or truncated.
"""

from __future__ import annotations

from typing import Any, Iterable, List

import numpy as np
from pydantic import BaseModel, Field, StrictInt, field_validator

from .constants import STATE_SIZE
from .field import P


class FieldVector(BaseModel):
    """An ordered vector of canonical field elements, position 0 first."""

    elements: List[StrictInt] = Field(default_factory=list)

    @field_validator("elements")
    @classmethod
    def _canonical(cls, v: List[int]) -> List[int]:
        for i, x in enumerate(v):
            if not 0 <= x < P:
                raise ValueError(f"element {i} is outside [0, p): {x}")
        return v


class State(FieldVector):
    elements: List[StrictInt] = Field(..., min_length=STATE_SIZE, max_length=STATE_SIZE)


def _plain_ints(values: Iterable[Any]) -> List[Any]:
    # numpy unsigned/signed scalars are accepted as exact integers
    return [int(x) if isinstance(x, np.integer) else x for x in values]


def validate_state(values: Iterable[Any]) -> List[int]:
    """Return the input as a fresh list of ints, or raise pydantic.ValidationError."""
    return State(elements=_plain_ints(values)).elements


def validate_elements(values: Iterable[Any], length: int) -> List[int]:
    """Like validate_state but for an arbitrary fixed length."""
    elements = FieldVector(elements=_plain_ints(values)).elements
    if len(elements) != length:
        raise ValueError(f"expected {length} field elements, got {len(elements)}")
    return elements
