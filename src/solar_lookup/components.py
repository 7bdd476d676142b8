from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Union

CellValue = Union[str, int, float, None]


@dataclass(frozen=True)
class StreetNumber:
    """Compact street name and house number parsed from an address."""

    street: str = ""
    number: str = ""


@dataclass(frozen=True)
class SolarRecord:
    """Solar estimate for one address, as loaded from the spreadsheet."""

    panels: CellValue = None
    confidence_level: CellValue = None
    annual_output: CellValue = None
    kwp: CellValue = None
    kwh_per_kwp_per_year: CellValue = None
    availability_factor: CellValue = None
    avg_solar_panel_output: CellValue = None
    capacity: CellValue = None
    installation_date: CellValue = None

    def as_dict(self) -> Dict[str, CellValue]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


@dataclass(frozen=True)
class Overlay:
    """User edits layered over a :class:`SolarRecord`."""

    kwp: Optional[str] = None
    annual_output: Optional[str] = None
    kwh_per_kwp_per_year: Optional[str] = None
    availability_factor: Optional[str] = None
    avg_solar_panel_output: Optional[str] = None

    def as_dict(self) -> Dict[str, str]:
        """Only the fields that have been set."""
        return {
            item.name: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not None
        }


@dataclass(frozen=True)
class MatchCandidate:
    """A dataset key and the score it reached against a query."""

    key: str
    score: float
    rule: str


@dataclass
class MatchResult:
    """Outcome of ranking a query against the dataset keys."""

    query: str
    normalized_query: str = ""
    best_candidate: Optional[MatchCandidate] = None
    diagnostics: Dict[str, str] = field(default_factory=dict)

    @property
    def matched(self) -> bool:
        return self.best_candidate is not None


@dataclass
class LookupResult:
    """Record resolved for a query, with the match that selected it."""

    match: MatchResult
    record: Optional[SolarRecord] = None

    @property
    def found(self) -> bool:
        return self.record is not None

    def to_dict(self) -> Dict[str, Any]:
        best = self.match.best_candidate
        return {
            "query": self.match.query,
            "normalized_query": self.match.normalized_query,
            "matched_key": best.key if best else None,
            "match_score": round(best.score, 3) if best else None,
            "rule": best.rule if best else None,
            "record": self.record.as_dict() if self.record else None,
        }
