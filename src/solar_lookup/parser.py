from __future__ import annotations

import re

from .components import StreetNumber
from .normalize import normalize_address, strip_whitespace

STREET_THEN_NUMBER_PATTERN = re.compile(r"^([a-z\s]+?)\s+(\d+[a-z]*)")
HOUSE_NUMBER_PATTERN = re.compile(r"\d+[a-z]*")


def extract_street_number(address_text: str) -> StreetNumber:
    """Split an address into a compact street name and house number.

    ``"Kerkweg 6B, Utrecht"`` gives ``StreetNumber("kerkweg", "6b")``. When no
    street precedes the number the first number found anywhere is used and
    removed from the street; without any digits the number is empty.
    """
    normalized = normalize_address(address_text)

    match = STREET_THEN_NUMBER_PATTERN.match(normalized)
    if match:
        return StreetNumber(
            street=strip_whitespace(match.group(1).strip()),
            number=strip_whitespace(match.group(2).lower()),
        )

    number_match = HOUSE_NUMBER_PATTERN.search(normalized)
    if number_match:
        number = number_match.group(0).lower()
        street = normalized.replace(number, "", 1).strip()
        return StreetNumber(street=strip_whitespace(street), number=number)

    return StreetNumber(street=strip_whitespace(normalized), number="")
