from __future__ import annotations

import re
from typing import Optional

SURROUNDING_QUOTE_PATTERN = re.compile(r"^[\"']|[\"']$")
PUNCTUATION_PATTERN = re.compile(r"[.,;:]")
WHITESPACE_PATTERN = re.compile(r"\s+")


def _normalize_once(address: str) -> str:
    address = SURROUNDING_QUOTE_PATTERN.sub("", address)
    address = address.lower()
    address = PUNCTUATION_PATTERN.sub(" ", address)
    address = WHITESPACE_PATTERN.sub(" ", address)
    return address.strip()


def normalize_address(address_text: Optional[str]) -> str:
    """Canonical lookup form of a user-typed or spreadsheet address."""
    if not address_text:
        return ""

    address = str(address_text)
    # Quotes exposed by trimming (e.g. ' "Kerkweg 6"') need another pass.
    while True:
        normalized = _normalize_once(address)
        if normalized == address:
            return normalized
        address = normalized


def strip_whitespace(value: str) -> str:
    return WHITESPACE_PATTERN.sub("", value)
