import json
from pathlib import Path

import pytest

from providers.loader import ProviderDataError, load_policy_json, load_providers_csv, provider_from_record
from providers.mock import mock_consumer_policy, mock_providers

SAMPLE_DIR = Path(__file__).resolve().parent.parent / "sampledata"


def test_sample_csv_matches_mock_pool():
    assert load_providers_csv(SAMPLE_DIR / "providers.csv") == mock_providers()


def test_sample_policy_matches_mock_policy():
    assert load_policy_json(SAMPLE_DIR / "policy.json") == mock_consumer_policy()


def test_csv_with_empty_features_and_duplicates(tmp_path):
    path = tmp_path / "providers.csv"
    path.write_text(
        "id,address,stake,location,features,fee\n"
        "9,provider9,0,US-West,,0\n"
        "10,provider10,50,EU-Central,featA|featA|featB,1.25\n"
    )

    first, second = load_providers_csv(path)

    assert first.features == frozenset()
    assert first.stake == 0
    assert second.id == "10"
    assert second.features == frozenset({"featA", "featB"})
    assert second.fee == pytest.approx(1.25)


def test_csv_missing_columns(tmp_path):
    path = tmp_path / "providers.csv"
    path.write_text("id,address,stake\n1,p1,10\n")

    with pytest.raises(ProviderDataError, match="location"):
        load_providers_csv(path)


def test_policy_without_weights(tmp_path):
    path = tmp_path / "policy.json"
    path.write_text(json.dumps({"required_location": "EU-Central", "weights": None}))

    policy = load_policy_json(path)

    assert policy.required_location == "EU-Central"
    assert policy.required_features == frozenset()
    assert policy.min_stake == 0
    assert policy.weights is None


def test_policy_requires_location(tmp_path):
    path = tmp_path / "policy.json"
    path.write_text(json.dumps({"min_stake": 10}))

    with pytest.raises(ProviderDataError):
        load_policy_json(path)


def test_record_accepts_feature_list():
    provider = provider_from_record(
        {"id": 7, "address": "p7", "stake": "800", "location": "US-East", "features": ["featA", "featX"]}
    )

    assert provider.id == "7"
    assert provider.stake == 800
    assert provider.fee == 0.0
    assert provider.features == frozenset({"featA", "featX"})


def test_record_with_bad_stake():
    with pytest.raises(ProviderDataError):
        provider_from_record({"id": "1", "address": "p1", "stake": "lots", "location": "US-West"})


def test_policy_features_as_separated_string(tmp_path):
    path = tmp_path / "policy.json"
    path.write_text(json.dumps({"required_location": "US-West", "required_features": "featA|featB"}))

    assert load_policy_json(path).required_features == frozenset({"featA", "featB"})


def test_policy_single_feature_string_is_not_split_into_letters(tmp_path):
    path = tmp_path / "policy.json"
    path.write_text(json.dumps({"required_location": "US-West", "required_features": "featA"}))

    assert load_policy_json(path).required_features == frozenset({"featA"})


def test_policy_features_with_wrong_type(tmp_path):
    path = tmp_path / "policy.json"
    path.write_text(json.dumps({"required_location": "US-West", "required_features": {"featA": True}}))

    with pytest.raises(ProviderDataError, match="required_features"):
        load_policy_json(path)
