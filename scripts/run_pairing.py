"""
End-to-end pairing run.

Loads a provider pool (mock data, a CSV file or the provider registry),
validates the consumer policy weights and prints the selected providers.

    python scripts/run_pairing.py
    python scripts/run_pairing.py --providers sampledata/providers.csv --policy sampledata/policy.json --lenient
    python scripts/run_pairing.py --registry http://localhost:8080 --log-level DEBUG
"""

import argparse
import sys

from pairing.config import init_app
from pairing.errors import PairingError
from pairing.weights import validate_weights
from providers.loader import ProviderDataError, load_policy_json, load_providers_csv
from providers.mock import mock_consumer_policy, mock_providers
from providers.registry_client import ProviderRegistryClient, RegistryError


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Select the best providers for a consumer policy")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--providers", type=str, help="Provider CSV file (default: built-in mock pool)")
    source.add_argument("--registry", type=str, help="Provider registry base URL")
    parser.add_argument("--policy", type=str, help="Consumer policy JSON file (default: built-in mock policy)")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--strict", dest="strict_mode", action="store_true", default=None,
                      help="Fail when no provider matches the policy")
    mode.add_argument("--lenient", dest="strict_mode", action="store_false",
                      help="Return an empty list when no provider matches the policy")

    parser.add_argument("--log-level", type=str, default=None, help="DEBUG, INFO, WARNING, ...")
    return parser.parse_args(argv)


def run(argv=None) -> int:
    args = parse_args(argv)
    try:
        app = init_app(strict_mode=args.strict_mode, log_level=args.log_level)
    except PairingError as e:
        print(f"Failed to initialize pairing system: {e}", file=sys.stderr)
        return 1
    log = app.log

    try:
        if args.providers:
            providers = load_providers_csv(args.providers)
        elif args.registry:
            providers = ProviderRegistryClient(base_url=args.registry).fetch_providers()
        else:
            providers = mock_providers()

        policy = load_policy_json(args.policy) if args.policy else mock_consumer_policy()
    except (ProviderDataError, RegistryError, OSError) as e:
        log.error("Failed to load pairing input: %s", e)
        return 1

    try:
        # Making sure consumer policy weights are valid before pairing
        validate_weights(policy.weights)

        log.info(
            "Attempting to get pairing list (policy_location=%s, policy_min_stake=%d, policy_features_count=%d)",
            policy.required_location, policy.min_stake, len(policy.required_features),
        )
        top_scores = app.pairing_system.get_pairing_scores(providers, policy)
    except PairingError as e:
        log.error("Failed to get pairing list: %s", e)
        return 1

    log.info("Successfully retrieved pairing list (count=%d)", len(top_scores))
    log.info("----------------------------- TOP PROVIDERS -----------------------------")
    if not top_scores:
        log.info("No providers matched the policy and were selected.")

    for rank, record in enumerate(top_scores, start=1):
        p = record.provider
        log.info(
            "Selected provider rank=%d id=%s address=%s stake=%d location=%s fee=%s features=%s score=%.4f",
            rank, p.id, p.address, p.stake, p.location, p.fee, sorted(p.features), record.score,
        )
    return 0


if __name__ == "__main__":
    sys.exit(run())
