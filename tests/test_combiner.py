import pytest

from scoring.combiner import average_score, combine_scores, weighted_score


def test_average_mode_is_arithmetic_mean():
    components = {"Stake": 0.2, "Feature": 0.4, "Location": 1.0, "Fee": 0.6}

    assert combine_scores(components) == pytest.approx(0.55)
    assert combine_scores(components, None) == pytest.approx(0.55)
    assert combine_scores(components, {}) == pytest.approx(0.55)


def test_average_mode_with_no_scorers_is_zero():
    assert combine_scores({}) == 0.0
    assert average_score({}) == 0.0


def test_weighted_mode_uses_supplied_weights():
    components = {"Stake": 0.5, "Feature": 1.0, "Location": 1.0}
    weights = {"Stake": 0.5, "Feature": 0.3, "Location": 0.2}

    assert combine_scores(components, weights) == pytest.approx(0.25 + 0.3 + 0.2)


def test_weighted_mode_ignores_scorers_missing_from_weights():
    """
    A scorer absent from a non-empty weight mapping contributes exactly 0,
    whatever its raw value.
    """
    weights = {"Stake": 0.5, "Feature": 0.3, "Location": 0.2}
    base = {"Stake": 0.4, "Feature": 0.1, "Location": 0.5}

    for fee in (0.0, 0.3, 1.0):
        assert combine_scores({**base, "Fee": fee}, weights) == pytest.approx(combine_scores(base, weights))


def test_weighted_mode_does_not_renormalize():
    # only half the nominal weight is present: the total is NOT scaled back up
    assert weighted_score({"Stake": 1.0, "Fee": 1.0}, {"Stake": 0.5, "Feature": 0.5}) == pytest.approx(0.5)


def test_weighted_mode_does_not_clamp():
    assert combine_scores({"Stake": 1.0}, {"Stake": 2.0}) == pytest.approx(2.0)
