"""
Purpose: Ranking model (the "who is best" layer).
Takes providers (already eligible) + the shared NormalizationContext.
Produces one value in [0, 1] per scorer; higher is better.

| scorer   | value                                                    |
|----------|----------------------------------------------------------|
| Stake    | stake / max stake in the filtered pool                   |
| Feature  | share of the provider's features that are NOT required   |
| Location | 1.0 on an exact (case-insensitive) match, 0.5 otherwise  |
| Fee      | 1 - normalized fee (cheaper is better)                   |

Scorer names are the keys used in ConsumerPolicy.weights.
"""

from __future__ import annotations

from typing import List, Protocol

from providers.models import ConsumerPolicy, Provider

from .context import NormalizationContext

NON_MATCHING_LOCATION_SCORE = 0.5


class Scorer(Protocol):
    def score(self, provider: Provider, policy: ConsumerPolicy, context: NormalizationContext) -> float:
        ...

    def name(self) -> str:
        ...


class StakeScorer:
    """
    Stake relative to the largest stake in the pool. The context never holds a
    max stake of 0, so a stakeless pool scores 0 everywhere.
    """

    def score(self, provider: Provider, policy: ConsumerPolicy, context: NormalizationContext) -> float:
        if context.max_stake <= 0:
            return 0.0
        return provider.stake / context.max_stake

    def name(self) -> str:
        return "Stake"


class FeatureScorer:
    """
    Rewards extra capabilities beyond the required minimum: a provider that
    offers exactly the required features scores 0.
    """

    def score(self, provider: Provider, policy: ConsumerPolicy, context: NormalizationContext) -> float:
        features = set(provider.features)
        if not features:
            return 0.0

        extra = features - set(policy.required_features)
        return len(extra) / len(features)

    def name(self) -> str:
        return "Feature"


class LocationScorer:
    # NOTE: fixed two-level scheme, no geographic proximity

    def score(self, provider: Provider, policy: ConsumerPolicy, context: NormalizationContext) -> float:
        if provider.location.casefold() == policy.required_location.casefold():
            return 1.0
        return NON_MATCHING_LOCATION_SCORE

    def name(self) -> str:
        return "Location"


class FeeScorer:
    def score(self, provider: Provider, policy: ConsumerPolicy, context: NormalizationContext) -> float:
        normalized_fee = context.normalized_fees.get(provider.id)
        if normalized_fee is None:
            return 0.0
        return 1.0 - normalized_fee

    def name(self) -> str:
        return "Fee"


def default_scorers() -> List[Scorer]:
    return [StakeScorer(), FeatureScorer(), LocationScorer(), FeeScorer()]
