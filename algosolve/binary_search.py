"""Solutions built around binary search over sorted data or monotone answers."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from collections import Counter, deque
from collections.abc import Iterator, Sequence
from itertools import accumulate

SAFE_FOREVER = 1_000_000_000

_GRASS, _FIRE, _WALL = 0, 1, 2
_UNTOUCHED, _WALKED, _BURNING = 0, 1, 2
_DELTAS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def furthest_building(heights: Sequence[int], bricks: int, ladders: int) -> int:
    """Index of the furthest building reachable with the given bricks and ladders.

    Ladders go on the tallest climbs; the remaining climbs are paid in bricks.
    """

    def reachable(pos: int) -> bool:
        climbs = [b - a for a, b in zip(heights[:pos], heights[1 : pos + 1]) if b > a]
        if ladders >= len(climbs):
            return True
        climbs.sort(reverse=True)
        return bricks >= sum(climbs[ladders:])

    lo, hi = 0, len(heights) - 1
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if reachable(mid):
            lo = mid
        else:
            hi = mid - 1
    return max(lo, 0)


def maximum_beauty(
    items: Sequence[Sequence[int]], queries: Sequence[int]
) -> list[int]:
    """For each query price, the greatest beauty of an item costing no more, or 0."""
    ordered = sorted(((price, beauty) for price, beauty in items), key=lambda it: it[0])
    prices = [price for price, _ in ordered]
    best = list(accumulate((beauty for _, beauty in ordered), max))
    answers = []
    for query in queries:
        count = bisect_right(prices, query)
        answers.append(best[count - 1] if count else 0)
    return answers


def max_total_fruits(
    fruits: Sequence[Sequence[int]], start_pos: int, k: int
) -> int:
    """Most fruit gathered walking at most ``k`` steps from ``start_pos``.

    ``fruits`` holds ``(position, amount)`` pairs sorted by position.
    """
    positions = [pos for pos, _ in fruits]
    prefix = list(accumulate((amount for _, amount in fruits), initial=0))

    def harvest(left: int, right: int) -> int:
        return prefix[bisect_right(positions, right)] - prefix[bisect_left(positions, left)]

    best = 0
    for step in range(k + 1):
        right = start_pos + step
        left = min(start_pos, right - k + step)
        best = max(best, harvest(left, right))
        left = start_pos - step
        right = max(start_pos, left + k - step)
        best = max(best, harvest(left, right))
    return best


def minimum_time(time: Sequence[int], total_trips: int) -> int:
    """Least time for the buses together to complete ``total_trips`` trips."""
    if not time:
        raise ValueError("at least one bus is needed")

    def trips(total: int) -> int:
        return sum(total // t for t in time)

    lo = 1
    hi = min(min(time) * total_trips, max(time) * (total_trips // len(time) + 1))
    while lo < hi:
        mid = (lo + hi) // 2
        if trips(mid) < total_trips:
            lo = mid + 1
        else:
            hi = mid
    return hi


def _neighbours(i: int, j: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for di, dj in _DELTAS:
        ni, nj = i + di, j + dj
        if 0 <= ni < rows and 0 <= nj < cols:
            yield ni, nj


def maximum_minutes(grid: Sequence[Sequence[int]]) -> int:
    """Longest wait before leaving the top-left cell and still escaping the fire.

    Cells are 0 for grass, 1 for fire and 2 for a wall. Returns -1 if escape is
    impossible and ``SAFE_FOREVER`` if any wait is safe.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    rows, cols = len(grid), len(grid[0])
    target = (rows - 1, cols - 1)

    def escapes(stay: int) -> bool:
        status = [[_UNTOUCHED] * cols for _ in range(rows)]
        fire: deque[tuple[int, int]] = deque()
        for i, row in enumerate(grid):
            for j, cell in enumerate(row):
                if cell == _FIRE:
                    fire.append((i, j))
                    status[i][j] = _BURNING

        def spread() -> None:
            for _ in range(len(fire)):
                i, j = fire.popleft()
                for ni, nj in _neighbours(i, j, rows, cols):
                    if grid[ni][nj] != _WALL and status[ni][nj] != _BURNING:
                        status[ni][nj] = _BURNING
                        fire.append((ni, nj))

        for _ in range(stay):
            if not fire:
                break
            spread()

        if status[0][0] == _BURNING:
            return False

        walk: deque[tuple[int, int]] = deque([(0, 0)])
        while walk:
            for _ in range(len(walk)):
                i, j = walk.popleft()
                if (i, j) == target:
                    return True
                if status[i][j] == _BURNING:
                    continue
                for ni, nj in _neighbours(i, j, rows, cols):
                    if grid[ni][nj] != _WALL and status[ni][nj] == _UNTOUCHED:
                        status[ni][nj] = _WALKED
                        walk.append((ni, nj))
            spread()
        return False

    lo, hi = 0, rows * cols
    if escapes(hi):
        return SAFE_FOREVER
    if not escapes(lo):
        return -1
    while lo + 1 < hi:
        mid = (lo + hi) // 2
        if escapes(mid):
            lo = mid
        else:
            hi = mid
    return lo


def successful_pairs(
    spells: Sequence[int], potions: Sequence[int], success: int
) -> list[int]:
    """For each spell, how many potions make a product of at least ``success``."""
    strongest_first = sorted(potions, reverse=True)
    result = [0] * len(spells)
    taken = 0
    for index in sorted(range(len(spells)), key=lambda i: spells[i]):
        spell = spells[index]
        while taken < len(strongest_first) and spell * strongest_first[taken] >= success:
            taken += 1
        result[index] = taken
    return result


def repair_cars(ranks: Sequence[int], cars: int) -> int:
    """Least time for mechanics of the given ranks to repair ``cars`` cars.

    A mechanic of rank ``r`` repairs ``n`` cars in ``r * n * n`` minutes.
    """
    if not ranks:
        raise ValueError("at least one mechanic is needed")

    def repaired(total: int) -> int:
        return sum(math.isqrt(total // rank) for rank in ranks)

    per_mechanic = -(-cars // len(ranks))
    lo = 1
    hi = min(cars * cars * min(ranks), per_mechanic * per_mechanic * max(ranks))
    while lo < hi:
        mid = (lo + hi) // 2
        if repaired(mid) < cars:
            lo = mid + 1
        else:
            hi = mid
    return hi


def earliest_second_to_mark_indices(
    nums: Sequence[int], change_indices: Sequence[int]
) -> int:
    """Earliest second by which every index can be marked, or -1.

    ``change_indices`` holds 1-based indices into ``nums``.
    """

    def feasible(seconds: int) -> bool:
        marked = [False] * len(nums)
        available = seconds
        for second in range(seconds, 0, -1):
            available = min(second, available)
            index = change_indices[second - 1] - 1
            if marked[index]:
                continue
            if nums[index] > available - 1:
                return False
            available -= nums[index] + 1
            marked[index] = True
        return all(marked)

    lo, hi = 0, len(change_indices)
    if not feasible(hi):
        return -1
    while lo + 1 < hi:
        mid = (lo + 1 + hi) // 2
        if feasible(mid):
            hi = mid
        else:
            lo = mid
    return hi


class TopVotedCandidate:
    """Answers who led an election at a given time; ties go to the latest vote."""

    def __init__(self, persons: Sequence[int], times: Sequence[int]) -> None:
        if len(persons) != len(times):
            raise ValueError("persons and times must have the same length")
        self._times = list(times)
        self._leaders: list[int] = []
        votes: Counter[int] = Counter()
        leader: int | None = None
        for person in persons:
            votes[person] += 1
            if leader is None or votes[person] >= votes[leader]:
                leader = person
            self._leaders.append(leader)

    def leader_at(self, t: int) -> int:
        """The leading candidate at time ``t``."""
        index = bisect_right(self._times, t) - 1
        if index < 0:
            raise ValueError("no votes have been cast by that time")
        return self._leaders[index]