"""
Purpose: Merge per-scorer outputs into the final provider score.

Two mutually exclusive modes, chosen only by whether `weights` is empty:

- average:  final = mean(component values), 0 when there are no components
- weighted: final = sum(value * weights[name]) for names present in `weights`;
            a component missing from `weights` contributes exactly 0

Weights are trusted as given (validated upstream to sum to 1.0). They are never
renormalized, so leaving a scorer out of the mapping lowers every total.
"""

from __future__ import annotations

from typing import Mapping, Optional


def is_weighted(weights: Optional[Mapping[str, float]]) -> bool:
    return bool(weights)


def average_score(components: Mapping[str, float]) -> float:
    if not components:
        return 0.0
    return sum(components.values()) / len(components)


def weighted_score(components: Mapping[str, float], weights: Mapping[str, float]) -> float:
    total = 0.0
    for name, value in components.items():
        weight = weights.get(name)
        if weight is not None:
            total += value * weight
    return total


def combine_scores(components: Mapping[str, float], weights: Optional[Mapping[str, float]] = None) -> float:
    if is_weighted(weights):
        return weighted_score(components, weights)
    return average_score(components)
