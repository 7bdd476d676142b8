from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Sequence

from .components import CellValue, SolarRecord
from .normalize import normalize_address

logger = logging.getLogger(__name__)

ADDRESS_COLUMNS = ("Address", "address")

# Spreadsheet headers accepted for each record field, in order of preference.
FIELD_ALIASES: Dict[str, Sequence[str]] = {
    "panels": (
        "Number of solar panels",
        "Number of Solar Panels",
        "Panels",
        "panels",
        "Number of Panels",
        "Number of panels",
    ),
    "confidence_level": (
        "Confidence level (1-10)",
        "Confidence Level (1-10)",
        "Confidence level",
        "confidenceLevel",
    ),
    "annual_output": (
        "Annual output (kWh)",
        "Annual Output (kWh)",
        "Annual output",
        "annualOutput",
    ),
    "kwp": ("kWp", "KWp", "kwp"),
    "kwh_per_kwp_per_year": ("kWh/kWp/year_NL", "kwhPerKwpPerYear"),
    "availability_factor": (
        "Availability factor (%)",
        "Availability Factor (%)",
        "Availability factor",
        "availabilityFactor",
    ),
    "avg_solar_panel_output": (
        "Avg solar panel output (Wp)",
        "Avg Solar Panel Output (Wp)",
        "Avg solar panel output",
        "avgSolarPanelOutput",
    ),
    # Older sheets only carry a capacity column.
    "capacity": ("kWp", "KWp", "kwp", "Capacity", "capacity", "Total Capacity (kW)"),
    "installation_date": ("Installation Date", "Installation date", "installationDate"),
}


def _first_value(row: Mapping[str, Any], headers: Sequence[str]) -> CellValue:
    # 0 is a real value; only missing and blank cells are skipped.
    for header in headers:
        value = row.get(header)
        if value is not None and value != "":
            return value
    return None


def record_from_row(row: Mapping[str, Any]) -> SolarRecord:
    """Build a :class:`SolarRecord` from one parsed spreadsheet row."""
    return SolarRecord(
        **{name: _first_value(row, headers) for name, headers in FIELD_ALIASES.items()}
    )


def address_from_row(row: Mapping[str, Any]) -> str:
    for column in ADDRESS_COLUMNS:
        value = row.get(column)
        if value:
            return str(value)
    return ""


def build_dataset(rows: Iterable[Mapping[str, Any]]) -> Dict[str, SolarRecord]:
    """Key parsed spreadsheet rows by normalized address.

    Rows without an address are skipped and a repeated address keeps the
    last row.
    """
    dataset: Dict[str, SolarRecord] = {}
    for row in rows:
        key = normalize_address(address_from_row(row))
        if not key:
            continue
        dataset[key] = record_from_row(row)

    logger.info("Loaded %d addresses", len(dataset))
    return dataset
