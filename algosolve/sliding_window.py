"""Sliding-window solutions to array and string optimisation problems."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterator, Sequence

VOWELS = frozenset("aeiou")


def _window_sums(values: Sequence[int], size: int) -> Iterator[int]:
    """Yield the sum of every contiguous window of ``size`` values."""
    window = sum(values[:size])
    yield window
    for old, new in zip(values, values[size:]):
        window += new - old
        yield window


def max_satisfied(customers: Sequence[int], grumpy: Sequence[int], minutes: int) -> int:
    """Most satisfied customers when the owner keeps calm for ``minutes`` in a row."""
    if len(customers) != len(grumpy):
        raise ValueError("customers and grumpy must have the same length")
    if not 0 <= minutes <= len(customers):
        raise ValueError("minutes must lie between 0 and the number of minutes")
    base = sum(c for c, g in zip(customers, grumpy) if g == 0)
    gains = [c if g == 1 else 0 for c, g in zip(customers, grumpy)]
    return base + max(_window_sums(gains, minutes))


def max_score(card_points: Sequence[int], k: int) -> int:
    """Best total from taking ``k`` cards off the two ends of the row."""
    if not 0 <= k <= len(card_points):
        raise ValueError("k must lie between 0 and the number of cards")
    total = sum(card_points)
    remaining = len(card_points) - k
    if remaining == 0:
        return total
    return total - min(_window_sums(list(card_points), remaining))


def visible_points(
    points: Sequence[Sequence[int]], angle: int, location: Sequence[int]
) -> int:
    """Most points seen at once through a field of view of ``angle`` degrees.

    The field of view is converted to radians and truncated to a whole number.
    Points standing on the observer's location are always visible.
    """
    lx, ly = location
    same = 0
    angles: list[float] = []
    for px, py in points:
        if px == lx and py == ly:
            same += 1
        else:
            angles.append(math.atan2(py - ly, px - lx))
    angles.sort()
    angles += [a + 2 * math.pi for a in angles]

    arc = int(angle * math.pi / 180)
    best = 0
    lo = 0
    for hi, current in enumerate(angles):
        while current - angles[lo] > arc:
            lo += 1
        best = max(best, hi - lo + 1)
    return best + same


def min_operations(nums: Sequence[int], x: int) -> int:
    """Fewest elements taken from either end whose sum is ``x``, or -1."""
    target = sum(nums) - x
    if target < 0:
        return -1
    if target == 0:
        return len(nums)

    window = 0
    lo = 0
    longest = 0
    for hi, value in enumerate(nums):
        window += value
        while window > target:
            window -= nums[lo]
            lo += 1
        if window == target:
            longest = max(longest, hi - lo + 1)
    return -1 if longest == 0 else len(nums) - longest


def maximum_unique_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a contiguous run of pairwise distinct values."""
    seen: set[int] = set()
    window = 0
    best = 0
    lo = 0
    for value in nums:
        if value in seen:
            while True:
                dropped = nums[lo]
                lo += 1
                window -= dropped
                if dropped == value:
                    break
                seen.discard(dropped)
        seen.add(value)
        window += value
        best = max(best, window)
    return best


def _mismatches(text: str, first_one: bool) -> list[int]:
    """Per position, 1 where ``text`` differs from the alternating pattern."""
    result = []
    for index, ch in enumerate(text):
        expect_one = first_one != (index % 2 == 1)
        result.append(int(ch == "0" if expect_one else ch == "1"))
    return result


def min_flips(s: str) -> int:
    """Fewest flips that make some rotation of ``s`` alternate."""
    if not s:
        raise ValueError("string must not be empty")
    doubled = s + s
    return min(
        min(_window_sums(_mismatches(doubled, first_one), len(s)))
        for first_one in (False, True)
    )


def count_good(nums: Sequence[int], k: int) -> int:
    """Number of subarrays holding at least ``k`` pairs of equal values."""
    if k < 1:
        raise ValueError("k must be at least 1")
    counts: Counter[int] = Counter()
    pairs = 0
    lo = 0
    total = 0
    for value in nums:
        pairs += counts[value]
        counts[value] += 1
        while pairs - (counts[nums[lo]] - 1) >= k:
            counts[nums[lo]] -= 1
            pairs -= counts[nums[lo]]
            lo += 1
        if pairs >= k:
            total += lo + 1
    return total


def max_sum(nums: Sequence[int], m: int, k: int) -> int:
    """Largest sum of a length-``k`` window with at least ``m`` distinct values, or 0."""
    if not 1 <= k <= len(nums):
        return 0
    counts = Counter(nums[:k])
    window = sum(nums[:k])
    best = window if len(counts) >= m else None
    for old, new in zip(nums, nums[k:]):
        counts[new] += 1
        counts[old] -= 1
        if counts[old] == 0:
            del counts[old]
        window += new - old
        if len(counts) >= m:
            best = window if best is None else max(best, window)
    return 0 if best is None else best


def count_at_least(word: str, k: int) -> int:
    """Substrings holding every vowel and at least ``k`` consonants."""
    vowels: Counter[str] = Counter()
    others = 0
    lo = 0
    total = 0
    for ch in word:
        if ch in VOWELS:
            vowels[ch] += 1
        else:
            others += 1
        while len(vowels) == len(VOWELS) and others >= k:
            gone = word[lo]
            if gone in VOWELS:
                vowels[gone] -= 1
                if vowels[gone] == 0:
                    del vowels[gone]
            else:
                others -= 1
            lo += 1
        total += lo
    return total


def count_of_substrings(word: str, k: int) -> int:
    """Substrings holding every vowel and exactly ``k`` consonants."""
    return count_at_least(word, k) - count_at_least(word, k + 1)


def _best_alignment(bags: Sequence[tuple[int, int, int]], k: int) -> int:
    """Best coin total for windows aligned to the far end of each bag."""
    lo = 0
    window = 0
    best = 0
    for start, end, amount in bags:
        window += (abs(end - start) + 1) * amount
        while abs(end - bags[lo][1]) > k:
            lo_start, lo_end, lo_amount = bags[lo]
            window -= (abs(lo_end - lo_start) + 1) * lo_amount
            lo += 1
        lo_start, _, lo_amount = bags[lo]
        uncovered = max((abs(end - lo_start) - k + 1) * lo_amount, 0)
        best = max(best, window - uncovered)
    return best


def maximum_coins(coins: Sequence[Sequence[int]], k: int) -> int:
    """Most coins collected from ``k`` consecutive bags.

    Each entry of ``coins`` is ``(left, right, amount)``: every bag from
    ``left`` to ``right`` inclusive holds ``amount`` coins.
    """
    ordered = sorted(
        ((start, end, amount) for start, end, amount in coins), key=lambda c: c[0]
    )
    forward = _best_alignment(ordered, k)
    mirrored = [(end, start, amount) for start, end, amount in reversed(ordered)]
    return max(forward, _best_alignment(mirrored, k))


def max_free_time(
    event_time: int, k: int, start_time: Sequence[int], end_time: Sequence[int]
) -> int:
    """Longest free stretch after moving up to ``k`` meetings."""
    if k < 0:
        raise ValueError("k must not be negative")
    if len(start_time) != len(end_time):
        raise ValueError("start_time and end_time must have the same length")
    gaps = [
        begin - finish
        for begin, finish in zip([*start_time, event_time], [0, *end_time])
    ]
    if k >= len(gaps):
        return 0
    return max(0, max(_window_sums(gaps, k + 1)))


def total_fruit(fruits: Sequence[int]) -> int:
    """Longest run of trees holding at most two kinds of fruit."""
    baskets: Counter[int] = Counter()
    lo = 0
    best = 0
    for hi, fruit in enumerate(fruits):
        if fruit not in baskets:
            while len(baskets) > 1 and lo < hi:
                dropped = fruits[lo]
                baskets[dropped] -= 1
                if baskets[dropped] == 0:
                    del baskets[dropped]
                lo += 1
        baskets[fruit] += 1
        best = max(best, hi + 1 - lo)
    return best