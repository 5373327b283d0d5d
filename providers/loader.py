"""
Purpose: Materialize providers and consumer policies from files.
What it does:
- load_providers_csv: reads a provider table with pandas
  (columns: id, address, stake, location, features, fee; features separated by "|")
- load_policy_json: reads a consumer policy document
- provider_from_record: converts one loose mapping (CSV row, JSON object) into a Provider

Rule: Loading only. Nothing here filters or scores.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Union

import pandas as pd

from .models import ConsumerPolicy, Provider

PROVIDER_COLUMNS = ("id", "address", "stake", "location", "features", "fee")
FEATURE_SEPARATOR = "|"


class ProviderDataError(Exception):
    """Raised when a provider or policy source is missing required fields."""
    pass


def _split_features(raw: Union[str, Iterable[str], None]) -> List[str]:
    if raw is None:
        return []
    if isinstance(raw, str):
        return [feature.strip() for feature in raw.split(FEATURE_SEPARATOR) if feature.strip()]
    return [str(feature) for feature in raw]


def provider_from_record(record: Mapping[str, Any]) -> Provider:
    """
    Build a Provider from a mapping such as a CSV row or a registry JSON object.
    `features` may be a list or a "|" separated string; `fee` defaults to 0.
    """
    missing = [key for key in ("id", "address", "stake", "location") if key not in record]
    if missing:
        raise ProviderDataError(f"provider record is missing fields: {', '.join(missing)}")

    try:
        return Provider.new(
            provider_id=str(record["id"]),
            address=str(record["address"]),
            stake=int(record["stake"]),
            location=str(record["location"]),
            features=_split_features(record.get("features")),
            fee=float(record.get("fee", 0.0) or 0.0),
        )
    except (TypeError, ValueError) as e:
        raise ProviderDataError(f"invalid provider record {record.get('id')!r}: {e}") from e


def load_providers_csv(path: Union[str, Path]) -> List[Provider]:
    """
    Load a provider pool from CSV.
    """
    df = pd.read_csv(
        path,
        dtype={"id": str, "address": str, "location": str, "features": str},
        keep_default_na=False,
    )

    missing = [column for column in PROVIDER_COLUMNS if column not in df.columns]
    if missing:
        raise ProviderDataError(f"{path}: missing columns {', '.join(missing)}")

    return [provider_from_record(row) for row in df.to_dict(orient="records")]


def load_policy_json(path: Union[str, Path]) -> ConsumerPolicy:
    """
    Load a consumer policy document:

        {
            "required_location": "US-West",
            "required_features": ["featA", "featB"],
            "min_stake": 1000,
            "weights": {"Stake": 0.5, "Feature": 0.3, "Location": 0.2}
        }

    `weights` is optional; null or {} selects average scoring.
    """
    with open(path, "r") as f:
        data = json.load(f)

    if "required_location" not in data:
        raise ProviderDataError(f"{path}: policy needs a 'required_location'")

    required_features = data.get("required_features") or []
    if not isinstance(required_features, (str, list)):
        raise ProviderDataError(f"{path}: required_features must be a list or a '|' separated string")

    return ConsumerPolicy.new(
        required_location=data["required_location"],
        required_features=_split_features(required_features),
        min_stake=data.get("min_stake", 0),
        weights=data.get("weights"),
    )
