"""Address lookup and derived-field recalculation for rooftop solar estimates."""

from .components import LookupResult, MatchCandidate, MatchResult, Overlay, SolarRecord, StreetNumber
from .engine import AddressMatcher, EngineConfig
from .exceptions import DatasetNotLoaded, NoActiveRecord, SolarLookupError
from .normalize import normalize_address
from .parser import extract_street_number
from .recalc import effective_values, recompute
from .records import build_dataset, record_from_row
from .scorer import similar
from .session import LookupSession

__all__ = [
    "AddressMatcher",
    "EngineConfig",
    "LookupResult",
    "LookupSession",
    "MatchCandidate",
    "MatchResult",
    "Overlay",
    "SolarRecord",
    "StreetNumber",
    "SolarLookupError",
    "DatasetNotLoaded",
    "NoActiveRecord",
    "build_dataset",
    "effective_values",
    "extract_street_number",
    "normalize_address",
    "record_from_row",
    "recompute",
    "similar",
]
