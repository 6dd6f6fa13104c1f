"""String searching and character-counting routines."""

from __future__ import annotations

from collections import Counter


def build_lps(pattern: str) -> list[int]:
    """Return the longest-proper-prefix-that-is-also-suffix table of ``pattern``."""
    lps = [0] * len(pattern)
    length = 0
    for i, ch in enumerate(pattern[1:], start=1):
        while length and ch != pattern[length]:
            length = lps[length - 1]
        if ch == pattern[length]:
            length += 1
        lps[i] = length
    return lps


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return every start index of ``pattern`` in ``text``, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = build_lps(pattern)
    matches: list[int] = []
    matched = 0
    for i, ch in enumerate(text):
        while matched and ch != pattern[matched]:
            matched = lps[matched - 1]
        if ch == pattern[matched]:
            matched += 1
        if matched == len(pattern):
            matches.append(i - matched + 1)
            matched = lps[matched - 1]
    return matches


def is_anagram(first: str, second: str) -> bool:
    """Tell whether the two strings hold the same characters."""
    return len(first) == len(second) and Counter(first) == Counter(second)


def leftmost_non_repeating(text: str) -> str | None:
    """Return the first character that occurs once, or ``None``."""
    counts = Counter(text)
    return next((ch for ch in text if counts[ch] == 1), None)


def leftmost_repeating(text: str) -> str | None:
    """Return the first character that occurs more than once, or ``None``."""
    counts = Counter(text)
    return next((ch for ch in text if counts[ch] > 1), None)


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same both ways."""
    return text == text[::-1]


def reverse_words(text: str) -> str:
    """Reverse the order of the space-separated words of ``text``."""
    return " ".join(reversed(text.split(" ")))