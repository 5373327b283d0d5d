import pytest

from providers.mock import mock_consumer_policy, mock_providers
from providers.models import ConsumerPolicy, Provider
from scoring.context import (
    NormalizationContext,
    build_normalization_context,
    compute_max_stake,
    compute_normalized_fees,
)
from scoring.scorers import FeatureScorer, FeeScorer, LocationScorer, StakeScorer, default_scorers


@pytest.fixture
def policy():
    return mock_consumer_policy()


def test_context_uses_pool_maximums():
    pool = [
        Provider.new("a", "pa", 1000, "US-West", fee=2.0),
        Provider.new("b", "pb", 4000, "US-West", fee=0.5),
    ]
    context = build_normalization_context(pool)

    assert context.max_stake == 4000
    assert dict(context.normalized_fees) == {"a": 1.0, "b": 0.25}


def test_context_guards_zero_pools():
    pool = [
        Provider.new("a", "pa", 0, "US-West", fee=0.0),
        Provider.new("b", "pb", 0, "US-West", fee=0.0),
    ]
    context = build_normalization_context(pool)

    assert compute_max_stake(pool) == 0
    assert context.max_stake == 1
    assert dict(context.normalized_fees) == {"a": 0.0, "b": 0.0}


def test_context_for_empty_pool():
    context = build_normalization_context([])

    assert context.max_stake == 1
    assert dict(context.normalized_fees) == {}
    assert compute_normalized_fees([]) == {}


def test_context_is_read_only():
    context = build_normalization_context(mock_providers())

    with pytest.raises(TypeError):
        context.normalized_fees["1"] = 0.0


def test_stake_scorer_relative_to_max(policy):
    context = NormalizationContext(max_stake=3000, normalized_fees={})

    assert StakeScorer().score(Provider.new("1", "p1", 1500, "US-West"), policy, context) == pytest.approx(0.5)
    assert StakeScorer().score(Provider.new("2", "p2", 3000, "US-West"), policy, context) == pytest.approx(1.0)


def test_stake_scorer_zero_stake_pool(policy):
    pool = [Provider.new(str(i), f"p{i}", 0, "US-West") for i in range(3)]
    context = build_normalization_context(pool)

    assert all(StakeScorer().score(p, policy, context) == 0.0 for p in pool)


def test_feature_scorer_rewards_extra_features(policy):
    context = NormalizationContext()

    exact = Provider.new("1", "p1", 0, "US-West", ["featA", "featB"])
    extra = Provider.new("2", "p2", 0, "US-West", ["featA", "featB", "featC", "featD"])
    duplicated = Provider(id="3", address="p3", stake=0, location="US-West",
                          features=("featA", "featB", "featC", "featC"))

    assert FeatureScorer().score(exact, policy, context) == 0.0
    assert FeatureScorer().score(extra, policy, context) == pytest.approx(0.5)
    # duplicates collapse: {featA, featB, featC} -> 1 extra out of 3
    assert FeatureScorer().score(duplicated, policy, context) == pytest.approx(1 / 3)


def test_feature_scorer_without_features(policy):
    assert FeatureScorer().score(Provider.new("1", "p1", 0, "US-West"), policy, NormalizationContext()) == 0.0


def test_location_scorer_binary_scheme(policy):
    context = NormalizationContext()

    assert LocationScorer().score(Provider.new("1", "p1", 0, "US-WEST"), policy, context) == 1.0
    assert LocationScorer().score(Provider.new("2", "p2", 0, "EU-Central"), policy, context) == 0.5


def test_fee_scorer_inverts_normalized_fee(policy):
    context = NormalizationContext(max_stake=1, normalized_fees={"cheap": 0.2, "dear": 1.0})

    assert FeeScorer().score(Provider.new("cheap", "pc", 0, "US-West"), policy, context) == pytest.approx(0.8)
    assert FeeScorer().score(Provider.new("dear", "pd", 0, "US-West"), policy, context) == 0.0


def test_fee_scorer_defaults_to_zero_for_unknown_provider(policy):
    context = NormalizationContext(max_stake=1, normalized_fees={})
    assert FeeScorer().score(Provider.new("ghost", "pg", 0, "US-West"), policy, context) == 0


def test_every_scorer_is_bounded():
    """
    Every scorer output must stay within [0, 1] for the whole reference pool
    under several policies.
    """
    pool = mock_providers() + [
        Provider.new("empty", "pe", 0, "Nowhere", [], 0.0),
        Provider.new("rich", "pr", 10 ** 9, "US-West", ["featA"], 100.0),
    ]
    context = build_normalization_context(pool)
    policies = [
        mock_consumer_policy(),
        ConsumerPolicy.new("EU-Central"),
        ConsumerPolicy.new("US-West", ["featA", "featB", "featC", "featY", "featZ"], 0),
    ]

    for policy in policies:
        for provider in pool:
            for scorer in default_scorers():
                value = scorer.score(provider, policy, context)
                assert 0.0 <= value <= 1.0, (scorer.name(), provider.id, value)


def test_scorer_names_are_unique():
    names = [s.name() for s in default_scorers()]
    assert len(names) == len(set(names))
    assert names == ["Stake", "Feature", "Location", "Fee"]
