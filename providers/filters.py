"""
Purpose: Hard eligibility filtering (rule gates).
What it does:
Builds the base candidate set before normalization/scoring.

Every filter answers one question about one policy dimension:
- location: does the provider sit in the required location?
- feature: does the provider support every required feature?
- stake: does the provider hold at least the minimum stake?

A provider must pass ALL filters. Filters never reorder or mutate providers.

Output: "rule-qualified providers" (still not ranked).
"""

from __future__ import annotations

from typing import List, Protocol, Sequence

from .models import ConsumerPolicy, Provider


class Filter(Protocol):
    """
    Capability shared by every eligibility filter.

    `apply` must equal the subsequence of `providers` for which
    `apply_single` returns True.
    """

    def apply(self, providers: Sequence[Provider], policy: ConsumerPolicy) -> List[Provider]:
        ...

    def apply_single(self, provider: Provider, policy: ConsumerPolicy) -> bool:
        ...

    def name(self) -> str:
        ...


class _PredicateFilter:
    """
    Derives `apply` from `apply_single` so the two can never disagree.
    """

    def apply(self, providers: Sequence[Provider], policy: ConsumerPolicy) -> List[Provider]:
        return [provider for provider in providers if self.apply_single(provider, policy)]

    def apply_single(self, provider: Provider, policy: ConsumerPolicy) -> bool:
        raise NotImplementedError


class LocationFilter(_PredicateFilter):
    """Keeps providers located exactly in the required location (case-insensitive)."""

    def apply_single(self, provider: Provider, policy: ConsumerPolicy) -> bool:
        return provider.location.casefold() == policy.required_location.casefold()

    def name(self) -> str:
        return "location"


class FeatureFilter(_PredicateFilter):
    """Keeps providers whose feature set covers every required feature."""

    def apply_single(self, provider: Provider, policy: ConsumerPolicy) -> bool:
        return set(policy.required_features).issubset(provider.features)

    def name(self) -> str:
        return "feature"


class StakeFilter(_PredicateFilter):
    """Keeps providers staking at least `policy.min_stake` (inclusive)."""

    def apply_single(self, provider: Provider, policy: ConsumerPolicy) -> bool:
        return provider.stake >= policy.min_stake

    def name(self) -> str:
        return "stake"


def default_filters() -> List[Filter]:
    """
    The standard filter chain, in evaluation order.
    """
    return [LocationFilter(), FeatureFilter(), StakeFilter()]
