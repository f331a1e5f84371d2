import random

import pytest

from algosolve.sliding_window import (
    count_at_least,
    count_good,
    count_of_substrings,
    max_free_time,
    max_satisfied,
    max_score,
    max_sum,
    maximum_coins,
    maximum_unique_subarray,
    min_flips,
    min_operations,
    total_fruit,
    visible_points,
)


# max_satisfied

def test_max_satisfied_worked_example():
    customers = [1, 0, 1, 2, 1, 1, 7, 5]
    grumpy = [0, 1, 0, 1, 0, 1, 0, 1]
    assert max_satisfied(customers, grumpy, 3) == 16


def test_max_satisfied_never_grumpy_counts_everyone():
    customers = [3, 1, 4, 1, 5]
    assert max_satisfied(customers, [0] * 5, 2) == sum(customers)


def test_max_satisfied_window_covering_all_counts_everyone():
    customers = [3, 1, 4, 1, 5]
    grumpy = [1, 0, 1, 1, 0]
    assert max_satisfied(customers, grumpy, len(customers)) == sum(customers)


def test_max_satisfied_always_grumpy_single_minute():
    customers = [2, 9, 4, 6]
    assert max_satisfied(customers, [1] * 4, 1) == max(customers)


def test_max_satisfied_lies_between_base_and_total():
    customers = [4, 10, 10, 2, 8]
    grumpy = [1, 1, 0, 1, 0]
    base = sum(c for c, g in zip(customers, grumpy) if g == 0)
    result = max_satisfied(customers, grumpy, 2)
    assert base <= result <= sum(customers)


def test_max_satisfied_rejects_bad_arguments():
    with pytest.raises(ValueError):
        max_satisfied([1, 2], [0, 1], 3)
    with pytest.raises(ValueError):
        max_satisfied([1, 2], [0], 1)


# max_score

def test_max_score_example_takes_right_end():
    points = [1, 2, 3, 4, 5, 6, 1]
    assert max_score(points, 3) == sum(points[-3:])


def test_max_score_all_cards():
    points = [9, 7, 7, 9, 7, 7, 9]
    assert max_score(points, len(points)) == sum(points)


def test_max_score_single_card_picks_better_end():
    points = [5, 1, 1, 8]
    assert max_score(points, 1) == max(points[0], points[-1])


def test_max_score_non_decreasing_in_k():
    points = [3, 8, 1, 6, 2, 9, 4]
    scores = [max_score(points, k) for k in range(len(points) + 1)]
    assert scores == sorted(scores)


def test_max_score_rejects_bad_k():
    with pytest.raises(ValueError):
        max_score([1, 2, 3], 4)
    with pytest.raises(ValueError):
        max_score([1, 2, 3], -1)


# visible_points

def test_visible_points_all_in_view():
    points = [[2, 1], [2, 2], [3, 3]]
    assert visible_points(points, 90, [1, 1]) == len(points)


def test_visible_points_counts_points_at_location():
    points = [[2, 1], [2, 2], [3, 4], [1, 1]]
    assert visible_points(points, 90, [1, 1]) == len(points)


def test_visible_points_narrow_view():
    assert visible_points([[1, 0], [2, 1]], 13, [1, 1]) == 1


def test_visible_points_everything_on_location():
    points = [[4, 4]] * 3
    assert visible_points(points, 0, [4, 4]) == len(points)


def test_visible_points_same_direction_zero_angle():
    points = [[2, 1], [3, 1], [5, 1]]
    assert visible_points(points, 0, [1, 1]) == len(points)


def test_visible_points_wraps_around_negative_x_axis():
    points = [[-2, 1], [-2, -1]]
    assert visible_points(points, 90, [0, 0]) == len(points)


def test_visible_points_arc_is_truncated_to_whole_radians():
    points = [[2, 1], [1, 2]]
    assert visible_points(points, 45, [0, 0]) < len(points)
    assert visible_points(points, 90, [0, 0]) == len(points)


# min_operations

def test_min_operations_example():
    assert min_operations([1, 1, 4, 2, 3], 5) == 2


def test_min_operations_impossible():
    assert min_operations([5, 6, 7, 8, 9], 4) == min_operations([1, 2], 10) == -1


def test_min_operations_whole_array():
    nums = [2, 3, 4]
    assert min_operations(nums, sum(nums)) == len(nums)


def test_min_operations_keeps_middle_element():
    nums = [3, 2, 20, 1, 1, 3]
    assert min_operations(nums, 10) == len(nums) - 1


# maximum_unique_subarray

def test_maximum_unique_subarray_examples():
    nums = [4, 2, 4, 5, 6]
    assert maximum_unique_subarray(nums) == sum(nums[1:])
    nums = [5, 2, 1, 2, 5, 2, 1, 2, 5]
    assert maximum_unique_subarray(nums) == sum(nums[:3])


def test_maximum_unique_subarray_distinct_values():
    nums = [3, 9, 1, 7]
    assert maximum_unique_subarray(nums) == sum(nums)


def test_maximum_unique_subarray_repeated_value():
    nums = [7, 7, 7]
    assert maximum_unique_subarray(nums) == nums[0]


# min_flips

def test_min_flips_example():
    assert min_flips("111000") == 2


def test_min_flips_rotation_invariant():
    s = "1110010"
    expected = min_flips(s)
    for shift in range(len(s)):
        assert min_flips(s[shift:] + s[:shift]) == expected


def test_min_flips_complement_invariant():
    s = "1101001110"
    complement = s.translate(str.maketrans("01", "10"))
    assert min_flips(s) == min_flips(complement)


def test_min_flips_bounded_by_half_length():
    rng = random.Random(7)
    for _ in range(20):
        s = "".join(rng.choice("01") for _ in range(rng.randint(1, 12)))
        assert min_flips(s) <= len(s) // 2


def test_min_flips_rejects_empty():
    with pytest.raises(ValueError):
        min_flips("")


# count_good

def test_count_good_examples():
    assert count_good([1, 1, 1, 1, 1], 10) == 1
    assert count_good([3, 1, 4, 3, 2, 2, 4], 2) == 4


def test_count_good_all_equal_single_pair():
    n = 6
    assert count_good([5] * n, 1) == n * (n - 1) // 2


def test_count_good_distinct_values_have_no_pairs():
    assert count_good(list(range(6)), 1) == count_good([], 1)


def test_count_good_non_increasing_in_k():
    nums = [2, 2, 3, 2, 3, 3, 2]
    counts = [count_good(nums, k) for k in range(1, 8)]
    assert counts == sorted(counts, reverse=True)


def test_count_good_rejects_non_positive_k():
    with pytest.raises(ValueError):
        count_good([1, 1], 0)


# max_sum

def test_max_sum_example():
    assert max_sum([2, 6, 7, 3, 1, 7], 3, 4) == 18


def test_max_sum_one_distinct_required():
    nums = [5, 9, 9, 2, 4, 5, 4]
    assert max_sum(nums, 1, 3) == sum(nums[:3])


def test_max_sum_whole_array():
    nums = [4, 1, 3]
    assert max_sum(nums, 1, len(nums)) == sum(nums)


def test_max_sum_no_qualifying_window():
    assert max_sum([1, 2], 1, 5) == 0
    assert max_sum([1, 2, 1, 2, 1, 2, 1], 3, 3) == max_sum([1, 2], 1, 5)


# count_of_substrings / count_at_least

def test_count_of_substrings_examples():
    assert count_of_substrings("aeiou", 0) == 1
    assert count_of_substrings("ieaouqqieaouqq", 1) == 3


def test_count_of_substrings_missing_vowel():
    word = "aeioqq"
    assert all(count_of_substrings(word, k) == count_at_least(word, 0) for k in range(3))


def test_count_of_substrings_sums_to_at_least_zero():
    word = "xaeiouxyaeiou"
    total = sum(count_of_substrings(word, k) for k in range(len(word) + 1))
    assert total == count_at_least(word, 0)


def test_count_at_least_non_increasing():
    word = "baeioubcuoiea"
    counts = [count_at_least(word, k) for k in range(5)]
    assert counts == sorted(counts, reverse=True)


# maximum_coins

def test_maximum_coins_example():
    assert maximum_coins([[8, 10, 1], [1, 3, 2], [5, 6, 4]], 4) == 10


def test_maximum_coins_single_wide_bag():
    k, amount = 2, 3
    assert maximum_coins([[1, 10, amount]], k) == k * amount


def test_maximum_coins_window_covers_everything():
    coins = [[1, 3, 2], [5, 6, 4]]
    total = sum((r - l + 1) * c for l, r, c in coins)
    assert maximum_coins(coins, 10) == total


def test_maximum_coins_does_not_mutate_and_ignores_order():
    coins = [[8, 10, 1], [1, 3, 2], [5, 6, 4]]
    snapshot = [list(c) for c in coins]
    result = maximum_coins(coins, 4)
    assert coins == snapshot
    assert maximum_coins(list(reversed(coins)), 4) == result


# max_free_time

def test_max_free_time_example():
    assert max_free_time(5, 1, [1, 3], [2, 5]) == 2


def test_max_free_time_moving_every_meeting_joins_all_gaps():
    start, end = [0, 2, 9], [1, 4, 10]
    busy = sum(e - s for s, e in zip(start, end))
    assert max_free_time(10, len(start), start, end) == 10 - busy


def test_max_free_time_non_decreasing_in_k():
    start, end = [1, 4, 8, 12], [2, 6, 9, 14]
    values = [max_free_time(20, k, start, end) for k in range(len(start) + 1)]
    assert values == sorted(values)


def test_max_free_time_rejects_bad_arguments():
    with pytest.raises(ValueError):
        max_free_time(5, -1, [1], [2])
    with pytest.raises(ValueError):
        max_free_time(5, 1, [1, 3], [2])


# total_fruit

def test_total_fruit_examples():
    fruits = [1, 2, 1]
    assert total_fruit(fruits) == len(fruits)
    fruits = [0, 1, 2, 2]
    assert total_fruit(fruits) == len(fruits) - 1
    fruits = [1, 2, 3, 2, 2]
    assert total_fruit(fruits) == len(fruits) - 1


def test_total_fruit_single_kind():
    fruits = [4] * 7
    assert total_fruit(fruits) == len(fruits)


def test_total_fruit_never_exceeds_length():
    rng = random.Random(3)
    for _ in range(20):
        fruits = [rng.randint(0, 3) for _ in range(rng.randint(1, 15))]
        assert 1 <= total_fruit(fruits) <= len(fruits)