"""
Scoring package.

Public API:
- NormalizationContext, build_normalization_context
- Scorer, StakeScorer, FeatureScorer, LocationScorer, FeeScorer, default_scorers
- combine_scores
"""

from .combiner import combine_scores
from .context import NormalizationContext, build_normalization_context
from .scorers import FeatureScorer, FeeScorer, LocationScorer, Scorer, StakeScorer, default_scorers

__all__ = [
    "NormalizationContext",
    "build_normalization_context",
    "Scorer",
    "StakeScorer",
    "FeatureScorer",
    "LocationScorer",
    "FeeScorer",
    "default_scorers",
    "combine_scores",
]
