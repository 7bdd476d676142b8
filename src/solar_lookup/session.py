"""Caller-side state: the loaded dataset, the selected record and its edits."""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from .components import CellValue, LookupResult, Overlay, SolarRecord
from .engine import AddressMatcher
from .exceptions import DatasetNotLoaded, NoActiveRecord
from .recalc import effective_values, recompute


class LookupSession:
    """
    Holds one user's view of the dataset.

    A successful search selects a record and starts a fresh set of edits;
    edits recompute the derived fields of that record only.
    """

    def __init__(
        self,
        dataset: Mapping[str, SolarRecord],
        matcher: Optional[AddressMatcher] = None,
    ):
        self._dataset = dataset
        self._matcher = matcher or AddressMatcher()
        self.record: Optional[SolarRecord] = None
        self.overlay = Overlay()

    @property
    def is_loaded(self) -> bool:
        return len(self._dataset) > 0

    def search(self, query: str) -> LookupResult:
        """
        Look up ``query`` and make the matched record the active one.

        Raises DatasetNotLoaded when there is nothing to search yet.
        """
        if not self.is_loaded:
            raise DatasetNotLoaded(query)

        result = self._matcher.lookup(query, self._dataset)
        self.record = result.record
        self.overlay = Overlay()
        return result

    def edit(self, field: str, value: CellValue) -> Overlay:
        """Set one field of the working copy; raises NoActiveRecord if none."""
        if self.record is None:
            raise NoActiveRecord(field)
        self.overlay = recompute(self.record, self.overlay, field, value)
        return self.overlay

    def values(self) -> Dict[str, CellValue]:
        if self.record is None:
            return {}
        return effective_values(self.record, self.overlay)
