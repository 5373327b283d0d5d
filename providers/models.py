"""
Purpose: Core data models for the pairing domain.
What it does:
Defines the structure of a Provider, the ConsumerPolicy it is matched against,
and the PairingScore record produced for every provider that survives filtering.

Rule: No filtering, scoring or I/O here. Models only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Mapping, Optional


@dataclass(frozen=True)
class Provider:
    """
    A read-only snapshot of an RPC service provider for one pairing request.
    """
    id: str
    address: str
    stake: int
    location: str
    features: FrozenSet[str] = frozenset()
    fee: float = 0.0

    @classmethod
    def new(
        cls,
        provider_id: str,
        address: str,
        stake: int,
        location: str,
        features: Iterable[str] = (),
        fee: float = 0.0,
    ) -> Provider:
        # duplicate feature names collapse here so they never double-count
        return cls(
            id=str(provider_id),
            address=address,
            stake=int(stake),
            location=location,
            features=frozenset(features),
            fee=float(fee),
        )


@dataclass(frozen=True)
class ConsumerPolicy:
    """
    What a consumer requires from a provider, plus optional scoring weights.

    `weights` maps scorer name -> weight. When present the values are expected
    to sum to 1.0 already (see pairing.weights.validate_weights); the pairing
    core only consumes them.
    """
    required_location: str
    required_features: FrozenSet[str] = frozenset()
    min_stake: int = 0
    weights: Optional[Mapping[str, float]] = None

    @classmethod
    def new(
        cls,
        required_location: str,
        required_features: Iterable[str] = (),
        min_stake: int = 0,
        weights: Optional[Mapping[str, float]] = None,
    ) -> ConsumerPolicy:
        return cls(
            required_location=required_location,
            required_features=frozenset(required_features),
            min_stake=int(min_stake),
            weights=dict(weights) if weights else None,
        )


@dataclass(frozen=True)
class PairingScore:
    """
    Final score of one provider plus the raw output of every scorer,
    kept for explainability.
    """
    provider: Provider
    score: float
    components: Dict[str, float] = field(default_factory=dict)
