"""Small string and counting puzzles."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def longest_palindrome(words: Iterable[str]) -> int:
    """Length of the longest palindrome built by concatenating two-letter words."""
    counts = Counter(words)
    centre_free = True
    length = 0
    for word in counts:
        count = counts[word]
        if count == 0:
            continue
        mirror = word[::-1]
        if word == mirror:
            if centre_free and count % 2 == 1:
                centre_free = False
                length += count * 2
            else:
                length += (count // 2) * 4
        elif mirror in counts:
            used = min(count, counts[mirror])
            counts[word] -= used
            counts[mirror] -= used
            length += used * 4
    return length


def difference_of_sums(n: int, m: int) -> int:
    """Sum of 1..n not divisible by ``m`` minus the sum of those that are."""
    if m == 0:
        raise ValueError("m must not be zero")
    return sum(-i if i % m == 0 else i for i in range(1, n + 1))


def resulting_string(s: str) -> str:
    """Repeatedly remove adjacent letters that are consecutive in the alphabet.

    ``a`` and ``z`` also count as consecutive.
    """
    kept: list[str] = []
    for ch in s:
        if kept and abs(ord(kept[-1]) - ord(ch)) in (1, 25):
            kept.pop()
        else:
            kept.append(ch)
    return "".join(kept)