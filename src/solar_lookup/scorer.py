from __future__ import annotations


def containment_ratio(left: str, right: str) -> float:
    """Length ratio of two strings when one contains the other, else 0."""
    longer, shorter = (left, right) if len(left) > len(right) else (right, left)
    if not longer:
        return 1.0
    if shorter not in longer:
        return 0.0
    return len(shorter) / len(longer)


def character_overlap(left: str, right: str) -> float:
    """Share of the longer string's characters found in the shorter one's set.

    This is a bag-of-characters measure, so anagrams score 1.0.
    """
    longer, shorter = (left, right) if len(left) > len(right) else (right, left)
    if not longer:
        return 1.0
    alphabet = set(shorter)
    matches = sum(1 for char in longer if char in alphabet)
    return matches / max(len(longer), len(shorter))


def similar(
    left: str,
    right: str,
    threshold: float = 0.8,
    strict_containment: bool = False,
) -> bool:
    """Coarse similarity gate between two street tokens.

    A string contained in the other counts as similar whatever the length
    ratio, unless ``strict_containment`` asks for the ratio to reach
    ``threshold`` as well. Other pairs must reach ``threshold`` on
    :func:`character_overlap`.
    """
    # An empty string inside a non-empty one has ratio 0 and is not similar.
    ratio = containment_ratio(left, right)
    if ratio > 0:
        return not strict_containment or ratio >= threshold

    return character_overlap(left, right) >= threshold
