"""Graph and board-search solutions: DAG dynamic programming, components, trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

_ALPHABET = 26


def _colour_index(ch: str) -> int:
    index = ord(ch) - ord("a")
    if not 0 <= index < _ALPHABET:
        raise ValueError(f"colour {ch!r} is not a lowercase letter")
    return index


def _topological_order(successors: Sequence[Sequence[int]]) -> list[int]:
    """Nodes in topological order; shorter than the graph if it holds a cycle."""
    indegree = [0] * len(successors)
    for outs in successors:
        for node in outs:
            indegree[node] += 1
    ready = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while ready:
        node = ready.popleft()
        order.append(node)
        for nxt in successors[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                ready.append(nxt)
    return order


def largest_path_value(colors: str, edges: Sequence[Sequence[int]]) -> int:
    """Greatest count of one colour along any path, or -1 if the graph has a cycle.

    Node ``i`` has colour ``colors[i]``, a lowercase letter.
    """
    palette = [_colour_index(ch) for ch in colors]
    successors: list[list[int]] = [[] for _ in palette]
    for src, dst in edges:
        successors[src].append(dst)

    order = _topological_order(successors)
    if len(order) < len(palette):
        return -1

    counts = [[0] * _ALPHABET for _ in palette]
    best = 0
    for node in order:
        here = counts[node]
        here[palette[node]] += 1
        best = max(best, max(here))
        for nxt in successors[node]:
            counts[nxt] = [max(a, b) for a, b in zip(counts[nxt], here)]
    return best


def get_ancestors(n: int, edges: Sequence[Sequence[int]]) -> list[list[int]]:
    """Sorted ancestors of every node of a directed acyclic graph."""
    successors: list[list[int]] = [[] for _ in range(n)]
    for src, dst in edges:
        successors[src].append(dst)

    order = _topological_order(successors)
    if len(order) < n:
        raise ValueError("graph contains a cycle")

    ancestors: list[set[int]] = [set() for _ in range(n)]
    for node in order:
        for nxt in successors[node]:
            ancestors[nxt] |= ancestors[node]
            ancestors[nxt].add(node)
    return [sorted(found) for found in ancestors]


def count_complete_components(n: int, edges: Sequence[Sequence[int]]) -> int:
    """Number of connected components in which every pair of nodes is joined."""
    neighbours: list[set[int]] = [set() for _ in range(n)]
    for a, b in edges:
        neighbours[a].add(b)
        neighbours[b].add(a)

    seen = [False] * n
    complete = 0
    for root in range(n):
        if seen[root]:
            continue
        seen[root] = True
        component = [root]
        stack = [root]
        while stack:
            node = stack.pop()
            for nxt in neighbours[node]:
                if not seen[nxt]:
                    seen[nxt] = True
                    component.append(nxt)
                    stack.append(nxt)
        size = len(component)
        if all(len(neighbours[node] - {node}) == size - 1 for node in component):
            complete += 1
    return complete


def _tree_adjacency(edges: Sequence[Sequence[int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(len(edges) + 1)]
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency


def _count_within(adjacency: Sequence[Sequence[int]], start: int, limit: int) -> int:
    """Nodes at distance at most ``limit`` from ``start``."""
    if limit < 0:
        return 0
    seen = {start}
    frontier = [start]
    for _ in range(limit):
        following = []
        for node in frontier:
            for nxt in adjacency[node]:
                if nxt not in seen:
                    seen.add(nxt)
                    following.append(nxt)
        if not following:
            break
        frontier = following
    return len(seen)


def max_target_nodes_within(
    edges1: Sequence[Sequence[int]], edges2: Sequence[Sequence[int]], k: int
) -> list[int]:
    """For each node of the first tree, most nodes within ``k`` edges once
    one edge joins it to the second tree."""
    second = _tree_adjacency(edges2)
    best_second = max(_count_within(second, node, k - 1) for node in range(len(second)))
    first = _tree_adjacency(edges1)
    return [_count_within(first, node, k) + best_second for node in range(len(first))]


def _two_colour(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Colour a tree with 0 and 1 so that neighbours differ."""
    colour = [-1] * len(adjacency)
    colour[0] = 0
    queue = deque([0])
    while queue:
        node = queue.popleft()
        for nxt in adjacency[node]:
            if colour[nxt] == -1:
                colour[nxt] = 1 - colour[node]
                queue.append(nxt)
    return colour


def max_target_nodes_even(
    edges1: Sequence[Sequence[int]], edges2: Sequence[Sequence[int]]
) -> list[int]:
    """For each node of the first tree, most nodes at an even distance once
    one edge joins it to the second tree."""
    first = _two_colour(_tree_adjacency(edges1))
    first_sizes = (first.count(0), first.count(1))
    second = _two_colour(_tree_adjacency(edges2))
    best_second = max(second.count(0), second.count(1))
    return [first_sizes[colour] + best_second for colour in first]


def snakes_and_ladders(board: Sequence[Sequence[int]]) -> int:
    """Fewest dice rolls from square 1 to the last square, or -1.

    Squares are numbered from the bottom-left, alternating direction each row.
    A cell holding a value other than -1 sends the player to that square.
    """
    if not board:
        raise ValueError("board must not be empty")
    size = len(board)
    cells: list[int] = []
    for row_number, row in enumerate(reversed(board)):
        cells.extend(row if row_number % 2 == 0 else reversed(row))
    last = size * size

    visited = [False] * last
    frontier = [1]
    moves = 0
    while frontier:
        following: list[int] = []
        for square in frontier:
            if square == last:
                return moves
            for step in range(1, 7):
                dest = square + step
                if dest > last:
                    break
                jump = cells[dest - 1]
                if jump != -1 and not visited[jump - 1]:
                    following.append(jump)
                    visited[jump - 1] = True
                elif not visited[dest - 1]:
                    following.append(dest)
                    visited[dest - 1] = True
        frontier = following
        moves += 1
    return -1