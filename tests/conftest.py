"""Shared fixtures: a small dataset shaped like the loaded spreadsheet."""

import pytest

from solar_lookup.components import SolarRecord
from solar_lookup.records import build_dataset


@pytest.fixture()
def rows():
    return [
        {
            "Address": "Hoofdstraat 12",
            "Number of solar panels": 20,
            "Confidence level (1-10)": 8,
            "Annual output (kWh)": 6840,
            "kWp": 8,
            "kWh/kWp/year_NL": 950,
            "Availability factor (%)": 0.9,
            "Avg solar panel output (Wp)": 400,
        },
        {
            "Address": '"Kerkweg 6B"',
            "Number of solar panels": 10,
            "Annual output (kWh)": 3420,
            "kWp": 4,
            "kWh/kWp/year_NL": 950,
            "Availability factor (%)": "90%",
            "Avg solar panel output (Wp)": 400,
        },
        {
            "Address": "Lange Nieuwstraat 101",
            "Number of solar panels": 0,
        },
    ]


@pytest.fixture()
def dataset(rows):
    return build_dataset(rows)


@pytest.fixture()
def record():
    return SolarRecord(
        panels=20,
        annual_output=6840,
        kwp=8,
        kwh_per_kwp_per_year=950,
        availability_factor=0.9,
        avg_solar_panel_output=400,
    )
