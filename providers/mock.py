"""
Reference provider pool and consumer policy used by the CLI demo and the tests.
"""

from __future__ import annotations

from typing import List

from .models import ConsumerPolicy, Provider


def mock_providers() -> List[Provider]:
    return [
        Provider.new("1", "provider1", 1000, "US-West", ["featA", "featB", "featC"], 3.0),
        Provider.new("2", "provider2", 2000, "US-East", ["featA", "featB"], 0.015),
        Provider.new("3", "provider3", 1500, "EU-Central", ["featA", "featC", "featD"], 4.5),
        Provider.new("4", "provider4", 500, "US-West", ["featB"], 0.005),
        Provider.new("5", "provider5", 2500, "US-West", ["featA", "featB", "featC", "featExtra"], 0.8),
        Provider.new("6", "provider6", 1200, "EU-Central", ["featA", "featD", "featE"], 1.7),
        Provider.new("7", "provider7", 800, "US-East", ["featA", "featB", "featC", "featX"], 2.0),
        Provider.new("8", "provider8", 3000, "US-West", ["featA", "featB", "featC", "featY", "featZ"], 2.5),
    ]


def mock_consumer_policy() -> ConsumerPolicy:
    # fee is left out of the weights on purpose: it then contributes 0
    return ConsumerPolicy.new(
        required_location="US-West",
        required_features=["featA", "featB"],
        min_stake=1000,
        weights={
            "Stake": 0.5,
            "Feature": 0.3,
            "Location": 0.2,
        },
    )
