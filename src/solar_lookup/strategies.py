from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Callable, Optional, Sequence

from .components import MatchCandidate, StreetNumber
from .normalize import strip_whitespace
from .scorer import containment_ratio, similar


@dataclass
class CandidatePair:
    """A parsed query and a parsed dataset key, compared by the rules below."""

    query: StreetNumber
    key: StreetNumber
    similarity_threshold: float = 0.7
    strict_containment: bool = False

    @property
    def streets_equal(self) -> bool:
        return self.key.street == self.query.street

    @property
    def numbers_equal(self) -> bool:
        return self.key.number == self.query.number

    @property
    def both_numbers(self) -> bool:
        return bool(self.key.number and self.query.number)

    @cached_property
    def streets_similar(self) -> bool:
        return similar(
            self.key.street,
            self.query.street,
            self.similarity_threshold,
            strict_containment=self.strict_containment,
        )


@dataclass(frozen=True)
class ScoringRule:
    name: str
    score: float
    applies: Callable[[CandidatePair], bool]


def _numbers_contain(pair: CandidatePair) -> bool:
    return pair.key.number in pair.query.number or pair.query.number in pair.key.number


def _streets_contain(pair: CandidatePair) -> bool:
    return pair.key.street in pair.query.street or pair.query.street in pair.key.street


# Evaluated top to bottom; the first rule that applies sets the score.
STREET_AND_NUMBER_RULES: Sequence[ScoringRule] = (
    ScoringRule("street_number", 1.0, lambda p: p.streets_equal and p.numbers_equal),
    ScoringRule(
        "street_number_spacing",
        0.95,
        lambda p: p.streets_equal
        and strip_whitespace(p.key.number) == strip_whitespace(p.query.number),
    ),
    ScoringRule(
        "street_partial_number",
        0.9,
        lambda p: p.streets_equal and p.both_numbers and _numbers_contain(p),
    ),
    ScoringRule("street_other_number", 0.7, lambda p: p.streets_equal and p.both_numbers),
    ScoringRule(
        "similar_street_number", 0.85, lambda p: p.streets_similar and p.numbers_equal
    ),
    ScoringRule("similar_street_other_number", 0.6, lambda p: p.streets_similar),
)

STREET_ONLY_RULES: Sequence[ScoringRule] = (
    ScoringRule("street", 0.8, lambda p: p.streets_equal),
    ScoringRule("similar_street", 0.6, lambda p: p.streets_similar),
    ScoringRule("partial_street", 0.5, _streets_contain),
)


def rules_for(
    query: StreetNumber,
    street_and_number_rules: Sequence[ScoringRule] = STREET_AND_NUMBER_RULES,
    street_only_rules: Sequence[ScoringRule] = STREET_ONLY_RULES,
) -> Sequence[ScoringRule]:
    """Pick the rule table matching what could be parsed from the query."""
    if query.street and query.number:
        return street_and_number_rules
    if query.street:
        return street_only_rules
    return ()


def first_applicable(pair: CandidatePair, rules: Sequence[ScoringRule]) -> Optional[ScoringRule]:
    for rule in rules:
        if rule.applies(pair):
            return rule
    return None


def containment_fallback(
    normalized_query: str, normalized_key: str, min_length: int = 5
) -> float:
    """Score raw normalized strings when no street/number rule applied.

    Only counts when the shorter string is longer than ``min_length``, so
    fragments like ``"weg"`` do not match every key.
    """
    shorter = min(normalized_query, normalized_key, key=len)
    if len(shorter) <= min_length:
        return 0.0
    return containment_ratio(normalized_query, normalized_key)


def score_key(
    key: str,
    normalized_key: str,
    normalized_query: str,
    pair: CandidatePair,
    rules: Sequence[ScoringRule],
    fallback_min_length: int = 5,
) -> Optional[MatchCandidate]:
    """Score one dataset key; ``None`` when nothing about it matches."""
    rule = first_applicable(pair, rules)
    if rule is not None:
        return MatchCandidate(key=key, score=rule.score, rule=rule.name)

    ratio = containment_fallback(normalized_query, normalized_key, fallback_min_length)
    if ratio > 0:
        return MatchCandidate(key=key, score=ratio, rule="containment")
    return None
