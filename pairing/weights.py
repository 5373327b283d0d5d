"""
Purpose: Upstream validation of consumer scoring weights.
What it does:
Checks a policy's weight mapping before it reaches the pairing system.

- empty or missing weights are valid (the combiner falls back to averaging)
- otherwise each weight must be in [0, 1] and the weights must sum to 1.0
- naming every scorer is NOT required: unnamed scorers get an effective weight of 0

Rule: PairingSystem never calls this. Callers validate, the core consumes.
"""

from __future__ import annotations

import math
from typing import Mapping, Optional

from .errors import MalformedWeightsError

WEIGHT_SUM_TOLERANCE = 1e-9


def validate_weights(weights: Optional[Mapping[str, float]]) -> None:
    if not weights:
        return

    for name, weight in weights.items():
        if not 0.0 <= weight <= 1.0:
            raise MalformedWeightsError(f"weight for {name!r} must be within [0, 1], got {weight}")

    total = math.fsum(weights.values())
    if not math.isclose(total, 1.0, rel_tol=0.0, abs_tol=WEIGHT_SUM_TOLERANCE):
        raise MalformedWeightsError(f"weights must sum to 1, got {total:.2f}")
