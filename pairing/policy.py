"""
Purpose: Central configuration for the pairing orchestrator.
What it does:

Stores all tunable thresholds/caps:

TOP_N_PROVIDERS = 5
PARALLEL_THRESHOLD = 50
WORKER_COUNT = 10

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError


@dataclass(frozen=True)
class PairingSettings:
    """
    Central configuration for pairing requests.
    """

    # --- Empty result handling ---
    # True: no eligible provider is an error (NoEligibleProvidersError).
    # False: return an empty pairing list.
    strict_mode: bool = True

    # --- Selection ---
    # Maximum number of providers returned per request.
    top_n: int = 5

    # --- Execution strategy ---
    # Stages with fewer providers than this run sequentially,
    # larger batches are fanned out to the worker pool.
    parallel_threshold: int = 50

    # Fixed worker pool size, independent of batch size.
    worker_count: int = 10

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if self.top_n <= 0:
            raise ConfigurationError("top_n must be > 0")

        if self.parallel_threshold <= 0:
            raise ConfigurationError("parallel_threshold must be > 0")

        if self.worker_count <= 0:
            raise ConfigurationError("worker_count must be > 0")


def default_pairing_settings() -> PairingSettings:
    """
    Convenience factory for the default settings.
    """
    s = PairingSettings()
    s.validate()
    return s


def lenient_pairing_settings() -> PairingSettings:
    """
    Same defaults, but an empty filter result is returned instead of raised.
    """
    s = PairingSettings(strict_mode=False)
    s.validate()
    return s
