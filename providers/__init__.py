"""
Providers domain package.

Public API:
- Domain models: Provider, ConsumerPolicy, PairingScore
- Eligibility filters: Filter, LocationFilter, FeatureFilter, StakeFilter, default_filters
"""
from .models import ConsumerPolicy, PairingScore, Provider
from .filters import Filter, FeatureFilter, LocationFilter, StakeFilter, default_filters

__all__ = [
    "Provider",
    "ConsumerPolicy",
    "PairingScore",
    "Filter",
    "LocationFilter",
    "FeatureFilter",
    "StakeFilter",
    "default_filters",
]
