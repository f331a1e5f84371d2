# algosolve

Compact solutions to classic algorithmic problems, grouped by technique.
It needs nothing outside the Python standard library (3.10 or later).

## Modules

### `algosolve.sliding_window`

Fixed and variable sized window problems over sequences and strings:

- `max_satisfied(customers, grumpy, minutes)` – most satisfied customers
  when the owner keeps calm for `minutes` in a row.
- `max_score(card_points, k)` – best total from taking `k` cards off the two
  ends of a row.
- `visible_points(points, angle, location)` – most points seen at once through
  a field of view of `angle` degrees; the view, converted to radians, is
  truncated to a whole number, and points on the observer's location always count.
- `min_operations(nums, x)` – fewest elements taken from either end summing to
  `x`, or -1.
- `maximum_unique_subarray(nums)` – largest sum of a run of distinct values.
- `min_flips(s)` – fewest flips that make some rotation of a binary string
  alternate.
- `count_good(nums, k)` – subarrays holding at least `k` pairs of equal values.
- `max_sum(nums, m, k)` – largest sum of a length-`k` window with at least `m`
  distinct values, or 0.
- `count_at_least(word, k)` and `count_of_substrings(word, k)` – substrings
  holding every vowel and at least / exactly `k` consonants.
- `maximum_coins(coins, k)` – most coins from `k` consecutive bags, where each
  entry is `(left, right, amount)`.
- `max_free_time(event_time, k, start_time, end_time)` – longest free stretch
  after moving up to `k` meetings.
- `total_fruit(fruits)` – longest run holding at most two kinds of fruit.

### `algosolve.binary_search`

Binary search over sorted data and over monotone answers:

- `furthest_building(heights, bricks, ladders)`
- `maximum_beauty(items, queries)`
- `max_total_fruits(fruits, start_pos, k)` – `fruits` are `(position, amount)`
  pairs sorted by position.
- `minimum_time(time, total_trips)`
- `maximum_minutes(grid)` – longest wait before escaping a spreading fire; grid
  cells are 0 grass, 1 fire, 2 wall. Returns -1 if escape is impossible and
  `SAFE_FOREVER` (1 000 000 000) if any wait is safe.
- `successful_pairs(spells, potions, success)`
- `repair_cars(ranks, cars)`
- `earliest_second_to_mark_indices(nums, change_indices)` – `change_indices`
  are 1-based; returns -1 if marking is impossible.
- `TopVotedCandidate(persons, times)` with `leader_at(t)` – who led the
  election at time `t`; ties go to the most recent vote.

### `algosolve.graphs`

Traversal and dynamic programming on graphs, DAGs, trees and boards:

- `largest_path_value(colors, edges)` – greatest count of one colour along a
  path, or -1 if the graph has a cycle.
- `get_ancestors(n, edges)` – sorted ancestors of every node of a DAG.
- `count_complete_components(n, edges)`
- `max_target_nodes_within(edges1, edges2, k)` and
  `max_target_nodes_even(edges1, edges2)` – best counts after joining two trees
  with one edge.
- `snakes_and_ladders(board)` – fewest dice rolls to the last square, or -1.

### `algosolve.strings`

- `longest_palindrome(words)` – longest palindrome from two-letter words.
- `difference_of_sums(n, m)` – sum of 1..n not divisible by `m` minus the sum
  of those that are.
- `resulting_string(s)` – repeatedly removes adjacent letters that are
  consecutive in the alphabet (`a` and `z` count as consecutive).

### `algosolve.nodes`

`TreeNode(val, left, right)` and `ListNode(val, next)` dataclasses.

## Errors

Inputs that cannot be answered raise `ValueError`: for example sequences of
mismatched lengths, an empty grid or board, an empty binary string in
`min_flips`, `m == 0` in `difference_of_sums`, a cycle in `get_ancestors`, a
colour that is not a lowercase letter, or `leader_at` asked about a time before
the first vote.

## Example

```python
from algosolve.sliding_window import total_fruit
from algosolve.binary_search import TopVotedCandidate
from algosolve.strings import resulting_string

total_fruit([1, 2, 1])          # 3
resulting_string("abc")         # "c"

election = TopVotedCandidate([0, 1, 1, 0, 0, 1, 0], [0, 5, 10, 15, 20, 25, 30])
election.leader_at(12)          # 1
```

## What it does not do

This is a library only. It has no command-line program: nothing reads input
from the terminal or prints answers; call the functions from Python.

## Running the tests

```
pip install -e ".[test]"
pytest
```