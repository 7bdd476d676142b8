from solar_lookup.scorer import character_overlap, containment_ratio, similar


class TestSimilar:
    def test_identical(self):
        assert similar("kerkweg", "kerkweg")

    def test_both_empty(self):
        assert similar("", "")

    def test_empty_against_non_empty(self):
        assert not similar("", "kerkweg", 0.7)

    def test_containment_ignores_threshold(self):
        assert similar("weg", "kerkweg", 0.7)

    def test_strict_containment_applies_threshold(self):
        assert not similar("weg", "kerkweg", 0.7, strict_containment=True)
        assert similar("kerkwe", "kerkweg", 0.7, strict_containment=True)

    def test_anagrams_match(self):
        assert similar("kerkweg", "gewkrek")

    def test_dropped_letter_matches(self):
        assert similar("kerkwg", "kerkweg", 0.7)

    def test_unrelated_streets(self):
        assert not similar("kerkweg", "dorpsstraat", 0.7)

    def test_threshold_is_inclusive(self):
        assert similar("abcd", "abce", 0.75)
        assert not similar("abcd", "abce", 0.8)


def test_character_overlap_uses_second_string_on_equal_length():
    assert character_overlap("aab", "abc") == 2 / 3
    assert character_overlap("abc", "aab") == 1.0


def test_containment_ratio():
    assert containment_ratio("kerkweg 6", "kerkweg 6b") == 0.9
    assert containment_ratio("kerkweg", "dorpsstraat") == 0.0
    assert containment_ratio("", "") == 1.0
