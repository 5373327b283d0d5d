"""
Purpose: Orchestrator / decision pipeline (the "glue").
What it does:
Accepts a provider pool and a consumer policy and runs

    filter -> normalize -> score -> combine -> sort -> truncate

returning the top providers for the policy.

- Each stage runs sequentially for small pools and on the fixed worker pool
  once the pool reaches PairingSettings.parallel_threshold.
- Strict mode turns "no eligible providers" into NoEligibleProvidersError,
  lenient mode returns an empty list.
- Every stage reports through the injected logger: stage start/end,
  per-filter before/after counts, per-provider score breakdown and the final
  selection.

Rule: PairingSystem never validates weights and never mutates providers.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple

from providers.filters import Filter
from providers.models import ConsumerPolicy, PairingScore, Provider
from scoring.combiner import combine_scores, is_weighted
from scoring.context import NormalizationContext, build_normalization_context
from scoring.scorers import Scorer

from .errors import NoEligibleProvidersError
from .policy import PairingSettings, default_pairing_settings
from .workers import run_worker_pool

module_logger = logging.getLogger(__name__)


class PairingSystem:
    """
    Selects the best matching providers for a consumer policy.
    """
    def __init__(
        self,
        filters: Sequence[Filter],
        scorers: Sequence[Scorer],
        logger: Optional[logging.Logger] = None,
        settings: Optional[PairingSettings] = None,
    ):
        self.filters = list(filters)
        self.scorers = list(scorers)
        # without an injected logger, events go to the package logger (NullHandler by default)
        self.logger = logger or module_logger
        self.settings = settings or default_pairing_settings()
        self.settings.validate()

    @property
    def strict_mode(self) -> bool:
        return self.settings.strict_mode

    def _runs_in_parallel(self, count: int) -> bool:
        return count >= self.settings.parallel_threshold

    # -------------------------
    # Filtering
    # -------------------------

    def filter_providers(self, providers: Sequence[Provider], policy: ConsumerPolicy) -> List[Provider]:
        """
        Keep the providers that pass every filter, in their input order.
        Never fails; may return an empty list.
        """
        self.logger.debug("Starting provider filtering (initial_count=%d)", len(providers))

        if not providers:
            self.logger.debug("Finished provider filtering (final_count=0)")
            return []

        if not self._runs_in_parallel(len(providers)):
            filtered = list(providers)
            for provider_filter in self.filters:
                count_before = len(filtered)
                filtered = provider_filter.apply(filtered, policy)
                self._log_filter_counts(provider_filter.name(), count_before, len(filtered))
            self.logger.debug("Finished sequential provider filtering (final_count=%d)", len(filtered))
            return filtered

        filtered = self._parallel_filter_providers(providers, policy)
        self.logger.debug("Finished parallel provider filtering (final_count=%d)", len(filtered))
        return filtered

    def _parallel_filter_providers(self, providers: Sequence[Provider], policy: ConsumerPolicy) -> List[Provider]:
        def check(worker_id: int, provider: Provider) -> Tuple[Provider, Optional[str]]:
            for provider_filter in self.filters:
                if not provider_filter.apply_single(provider, policy):
                    self.logger.debug(
                        "Filter-worker %d: provider %s rejected by %s filter",
                        worker_id, provider.id, provider_filter.name(),
                    )
                    return provider, provider_filter.name()
            return provider, None

        outcomes = run_worker_pool(providers, check, self.settings.worker_count)

        rejected_by = Counter(name for _, name in outcomes if name is not None)
        passed = {id(provider) for provider, name in outcomes if name is None}

        # filters short-circuit in chain order, so the rejection tally
        # reproduces the sequential before/after counts
        remaining = len(providers)
        for provider_filter in self.filters:
            count_after = remaining - rejected_by[provider_filter.name()]
            self._log_filter_counts(provider_filter.name(), remaining, count_after)
            remaining = count_after

        return [provider for provider in providers if id(provider) in passed]

    def _log_filter_counts(self, filter_name: str, count_before: int, count_after: int) -> None:
        self.logger.debug(
            "Filter applied (filter_name=%s, count_before=%d, count_after=%d)",
            filter_name, count_before, count_after,
        )

    # -------------------------
    # Scoring
    # -------------------------

    def rank_providers(self, providers: Sequence[Provider], policy: ConsumerPolicy) -> List[PairingScore]:
        """
        Score every provider against one shared NormalizationContext.

        Records come back in completion order, NOT sorted.
        """
        self.logger.debug("Starting provider ranking (provider_count=%d)", len(providers))

        if not providers:
            self.logger.debug("No providers to rank, returning empty list.")
            return []

        context = build_normalization_context(providers)
        self.logger.debug("Built normalization context (max_stake=%d)", context.max_stake)

        if is_weighted(policy.weights):
            omitted = [scorer.name() for scorer in self.scorers if scorer.name() not in policy.weights]
            self.logger.debug("Applying weighted scoring logic (weights=%s)", dict(policy.weights))
            if omitted:
                self.logger.debug("Scorers not found in policy weights, applying 0 weight: %s", omitted)
        else:
            self.logger.debug("Applying average (equal weight) scoring logic (scorer_count=%d)", len(self.scorers))

        if not self._runs_in_parallel(len(providers)):
            scores = [self._score_provider(0, provider, policy, context) for provider in providers]
        else:
            scores = run_worker_pool(
                providers,
                lambda worker_id, provider: self._score_provider(worker_id, provider, policy, context),
                self.settings.worker_count,
            )

        self.logger.debug("Finished calculating all provider scores")
        return scores

    def _score_provider(
        self,
        worker_id: int,
        provider: Provider,
        policy: ConsumerPolicy,
        context: NormalizationContext,
    ) -> PairingScore:
        components: Dict[str, float] = {}
        for scorer in self.scorers:
            components[scorer.name()] = scorer.score(provider, policy, context)

        final_score = combine_scores(components, policy.weights)

        self.logger.debug(
            "Scored provider (worker_id=%d, provider_id=%s, score=%.4f, components=%s)",
            worker_id, provider.id, final_score, components,
        )
        return PairingScore(provider=provider, score=final_score, components=components)

    # -------------------------
    # Selection
    # -------------------------

    def get_pairing_scores(self, providers: Sequence[Provider], policy: ConsumerPolicy) -> List[PairingScore]:
        """
        Filter, rank and sort, returning the top-N score records (best first).

        Raises NoEligibleProvidersError in strict mode when nothing passes the filters.
        """
        self.logger.info("Starting pairing request (initial_provider_count=%d)", len(providers))

        # Step 1: Filter providers based on policy requirements
        filtered = self.filter_providers(providers, policy)
        if not filtered:
            self.logger.warning("No providers matched the filter criteria.")
            if self.strict_mode:
                raise NoEligibleProvidersError("strict mode: no providers matched the filter criteria")
            return []
        self.logger.debug("Filtering complete (filtered_count=%d)", len(filtered))

        # Step 2: Score the filtered providers
        scored = self.rank_providers(filtered, policy)
        self.logger.debug("Ranking complete (ranked_count=%d)", len(scored))

        # Step 3: Highest score first; ties keep the filtered order
        position = {provider.id: index for index, provider in enumerate(filtered)}
        scored.sort(key=lambda record: (-record.score, position.get(record.provider.id, 0)))
        self.logger.debug("Sorting complete")

        # Step 4: Select the top N
        top = scored[:self.settings.top_n]
        for rank, record in enumerate(top, start=1):
            self.logger.debug(
                "Selected provider (rank=%d, provider_id=%s, address=%s, score=%.4f, components=%s)",
                rank, record.provider.id, record.provider.address, record.score, record.components,
            )

        self.logger.info("Finished pairing request (selected_count=%d)", len(top))
        return top

    def get_pairing_list(self, providers: Sequence[Provider], policy: ConsumerPolicy) -> List[Provider]:
        """
        The end-to-end entry point: the best providers for `policy`, best first.
        """
        return [record.provider for record in self.get_pairing_scores(providers, policy)]
