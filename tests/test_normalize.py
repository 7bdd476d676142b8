import pytest

from solar_lookup.normalize import normalize_address, strip_whitespace


def test_normalize_address_lowercases_and_replaces_punctuation():
    assert normalize_address("Hoofdstraat, 12") == "hoofdstraat 12"
    assert normalize_address("  A.B ;C:D  ") == "a b c d"


def test_normalize_address_strips_surrounding_quotes():
    assert normalize_address('"Kerkweg 6B"') == "kerkweg 6b"
    assert normalize_address("'Kerkweg 6B'") == "kerkweg 6b"


def test_normalize_address_keeps_other_symbols():
    assert normalize_address("Hoofdstraat 12!") == "hoofdstraat 12!"


def test_normalize_address_handles_empty_input():
    assert normalize_address("") == ""
    assert normalize_address(None) == ""
    assert normalize_address("  ,.;:  ") == ""


def test_normalize_address_strips_quotes_exposed_by_trimming():
    assert normalize_address(' "Kerkweg 6" ') == "kerkweg 6"


@pytest.mark.parametrize(
    "raw",
    [
        "Hoofdstraat, 12",
        ' "Kerkweg 6" ',
        "\"'nested'\"",
        "''",
        "Van der Waalsstraat  14a ; Utrecht.",
        "'",
    ],
)
def test_normalize_address_is_idempotent(raw):
    once = normalize_address(raw)
    assert normalize_address(once) == once


def test_strip_whitespace():
    assert strip_whitespace(" van der\twaals ") == "vanderwaals"
