from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

from .components import LookupResult, MatchCandidate, MatchResult, SolarRecord
from .normalize import normalize_address
from .parser import extract_street_number
from .strategies import (
    STREET_AND_NUMBER_RULES,
    STREET_ONLY_RULES,
    CandidatePair,
    ScoringRule,
    rules_for,
    score_key,
)

logger = logging.getLogger(__name__)


@dataclass
class EngineConfig:
    acceptance_threshold: float = 0.5
    similarity_threshold: float = 0.7
    fallback_min_length: int = 5
    strict_containment: bool = False
    street_and_number_rules: Sequence[ScoringRule] = STREET_AND_NUMBER_RULES
    street_only_rules: Sequence[ScoringRule] = STREET_ONLY_RULES


class AddressMatcher:
    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()

    def rank(self, query: str, keys: Iterable[str]) -> MatchResult:
        """Find the dataset key that best matches a free-form query."""
        normalized_query = normalize_address(query)
        result = MatchResult(query=query, normalized_query=normalized_query)
        keys = list(keys)

        if normalized_query in keys:
            logger.debug("Exact match found for: %s", normalized_query)
            result.best_candidate = MatchCandidate(key=normalized_query, score=1.0, rule="exact")
            return self._finish(result)

        query_parts = extract_street_number(query)
        rules = rules_for(
            query_parts,
            self.config.street_and_number_rules,
            self.config.street_only_rules,
        )

        best: Optional[MatchCandidate] = None
        for key in keys:
            pair = CandidatePair(
                query=query_parts,
                key=extract_street_number(key),
                similarity_threshold=self.config.similarity_threshold,
                strict_containment=self.config.strict_containment,
            )
            candidate = score_key(
                key,
                normalize_address(key),
                normalized_query,
                pair,
                rules,
                self.config.fallback_min_length,
            )
            if candidate is None:
                continue
            logger.debug("Candidate %r scored %.2f (%s)", key, candidate.score, candidate.rule)
            if best is None or candidate.score > best.score:
                best = candidate

        if best is not None and best.score >= self.config.acceptance_threshold:
            result.best_candidate = best
            logger.info(
                "Matched %r to %r (score: %.2f, rule: %s)",
                normalized_query,
                best.key,
                best.score,
                best.rule,
            )
        else:
            result.diagnostics["best_rejected_score"] = f"{best.score:.3f}" if best else "0"
            logger.info(
                "No match for %r among %d addresses", normalized_query, len(keys)
            )

        return self._finish(result)

    def lookup(self, query: str, dataset: Mapping[str, SolarRecord]) -> LookupResult:
        """Resolve a query to its record in ``dataset``, if any."""
        match = self.rank(query, dataset.keys())
        record = dataset[match.best_candidate.key] if match.best_candidate else None
        return LookupResult(match=match, record=record)

    @staticmethod
    def _finish(result: MatchResult) -> MatchResult:
        if result.best_candidate:
            result.diagnostics["selected_rule"] = result.best_candidate.rule
            result.diagnostics["selected_score"] = f"{result.best_candidate.score:.3f}"
        else:
            result.diagnostics["selected_rule"] = "none"
            result.diagnostics["selected_score"] = "0"
        return result
