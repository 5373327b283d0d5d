import argparse
from typing import Optional

import numpy as np
import pandas as pd

LOCATIONS = ["US-West", "US-East", "EU-Central", "EU-West", "AP-South"]
FEATURES = ["featA", "featB", "featC", "featD", "featE", "featX", "featY", "featZ", "featExtra"]


def generate_mock_providers(count=1000, output_file="mock_providers.csv", seed: Optional[int] = None):
    """
    Generates a random provider pool large enough to push the pairing system
    onto its parallel path. Columns match providers.loader.load_providers_csv.
    """
    rng = np.random.default_rng(seed)

    data = []
    for provider_index in range(count):
        feature_count = rng.integers(1, len(FEATURES) + 1)
        features = rng.choice(FEATURES, size=feature_count, replace=False)

        data.append({
            "id": str(provider_index + 1),
            "address": f"provider{provider_index + 1}",
            # ~10% of providers hold no stake at all
            "stake": 0 if rng.random() < 0.1 else int(rng.integers(100, 5000)),
            "location": rng.choice(LOCATIONS),
            "features": "|".join(sorted(features)),
            "fee": float(np.round(rng.uniform(0.0, 5.0), 3)),
        })

    df = pd.DataFrame(data)
    df.to_csv(output_file, index=False)
    print(f"Generated {count} providers and saved to '{output_file}'")

    print("\nProviders per location:")
    for location, location_count in df["location"].value_counts().items():
        print(f"  {location}: {location_count}")

    return df


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Generate a mock provider pool CSV")
    parser.add_argument("--count", type=int, default=1000, help="Number of providers")
    parser.add_argument("--output", type=str, default="mock_providers.csv", help="Output CSV path")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    generate_mock_providers(count=args.count, output_file=args.output, seed=args.seed)
