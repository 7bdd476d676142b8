"""Recalculation of derived solar fields when the user edits an input."""

from __future__ import annotations

import math
import re
from dataclasses import fields, replace
from typing import Dict, Optional

from .components import CellValue, Overlay, SolarRecord

OVERLAY_FIELDS = tuple(item.name for item in fields(Overlay))

# Editing any of these recomputes the annual output.
ANNUAL_OUTPUT_INPUTS = ("avg_solar_panel_output", "kwh_per_kwp_per_year", "availability_factor")

LEADING_NUMBER_PATTERN = re.compile(r"^\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def parse_number(value: CellValue) -> Optional[float]:
    """Read a number the way a form input would, ignoring trailing text."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = LEADING_NUMBER_PATTERN.match(str(value))
        if not match:
            return None
        number = float(match.group(0))
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def percentage(value: CellValue) -> Optional[float]:
    """Stored availability factor as a 0-100 percentage."""
    if isinstance(value, str) and "%" in value:
        return parse_number(value.replace("%", ""))
    number = parse_number(value)
    if number is not None and isinstance(value, (int, float)) and number < 1:
        return number * 100
    return number


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _positive(value: Optional[float]) -> bool:
    return value is not None and value > 0


def _resolve(record: SolarRecord, overlay: Overlay, name: str) -> CellValue:
    edited = getattr(overlay, name)
    if edited is not None and edited != "":
        return edited
    return getattr(record, name)


def _resolve_percentage(record: SolarRecord, overlay: Overlay) -> Optional[float]:
    edited = overlay.availability_factor
    if edited is not None and edited != "":
        return parse_number(edited)
    return percentage(record.availability_factor)


def recompute(
    record: SolarRecord, overlay: Overlay, edited_field: str, new_value: CellValue
) -> Overlay:
    """Apply one edit to ``overlay`` and refresh the fields derived from it.

    kWp follows the average panel output (``panels * Wp / 1000``) and the
    annual output follows kWp, yield per kWp and availability factor. A
    formula whose inputs are missing or not positive is skipped and the
    derived value already in the overlay stays as it was.
    """
    if edited_field not in OVERLAY_FIELDS:
        raise ValueError(f"{edited_field!r} is not an editable field")

    text = "" if new_value is None else str(new_value)
    updated = replace(overlay, **{edited_field: text})

    panels = parse_number(record.panels)
    avg_output = parse_number(_resolve(record, updated, "avg_solar_panel_output"))
    yield_per_kwp = parse_number(_resolve(record, updated, "kwh_per_kwp_per_year"))
    availability = _resolve_percentage(record, updated)
    kwp = parse_number(_resolve(record, updated, "kwp"))

    if edited_field == "avg_solar_panel_output" and _positive(panels) and _positive(avg_output):
        kwp = panels * avg_output / 1000
        updated = replace(updated, kwp=f"{kwp:.2f}")

    if (
        edited_field in ANNUAL_OUTPUT_INPUTS
        and _positive(kwp)
        and _positive(yield_per_kwp)
        and _positive(availability)
    ):
        annual_output = kwp * yield_per_kwp * (availability / 100)
        updated = replace(updated, annual_output=str(_round_half_up(annual_output)))

    return updated


def effective_values(record: SolarRecord, overlay: Overlay) -> Dict[str, CellValue]:
    """Record values with the user's edits on top, ready for display.

    The availability factor is shown as a bare percentage (``"95"`` rather
    than ``0.95`` or ``"95%"``), which is what the edit form works with.
    """
    values = record.as_dict()
    values.update(overlay.as_dict())

    if overlay.availability_factor is None and record.availability_factor is not None:
        factor = record.availability_factor
        if isinstance(factor, str) and "%" in factor:
            values["availability_factor"] = factor.replace("%", "")
        elif isinstance(factor, (int, float)) and factor < 1:
            values["availability_factor"] = f"{factor * 100:g}"
        else:
            values["availability_factor"] = str(factor)
    return values
