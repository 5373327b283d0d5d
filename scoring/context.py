"""
Purpose: Pool-wide statistics the scorers need before any provider is scored.
What it does:
Given the FILTERED provider list, computes:
- max stake (floored to 1 when the pool has no stake)
- max fee (floored to 1 when every fee is 0)
- normalized fee per provider id = fee / max fee

Rule: Built once per request, after filtering, before scoring. Read-only afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Sequence

from providers.models import Provider


@dataclass(frozen=True)
class NormalizationContext:
    """
    Shared, read-only input for every scorer in a single pairing request.
    """
    max_stake: int = 1
    normalized_fees: Mapping[str, float] = field(default_factory=dict)


def compute_max_stake(providers: Sequence[Provider]) -> int:
    """
    Largest stake in the pool, 0 for an empty pool.
    """
    max_stake = 0
    for provider in providers:
        if provider.stake > max_stake:
            max_stake = provider.stake
    return max_stake


def compute_normalized_fees(providers: Sequence[Provider]) -> Dict[str, float]:
    """
    Scale every fee against the highest fee in the pool so the most expensive
    provider maps to 1.0.
    """
    max_fee = max((provider.fee for provider in providers), default=0.0)
    if max_fee == 0:
        max_fee = 1.0

    return {provider.id: provider.fee / max_fee for provider in providers}


def build_normalization_context(providers: Sequence[Provider]) -> NormalizationContext:
    max_stake = compute_max_stake(providers)
    if max_stake == 0:
        max_stake = 1

    return NormalizationContext(
        max_stake=max_stake,
        normalized_fees=MappingProxyType(compute_normalized_fees(providers)),
    )
