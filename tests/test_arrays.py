from itertools import combinations, permutations
import random

import pytest

from algobox.arrays import (
    can_jump,
    contains_duplicate,
    fair_candy_swap,
    find_duplicate,
    find_right_interval,
    four_sum,
    intersection,
    majority_element,
    max_area,
    max_subarray,
    merge_intervals,
    merge_sorted,
    min_subarray_len,
    missing_number,
    next_permutation,
    plus_one,
    remove_duplicates,
    rotate,
    single_number,
    sort_array,
    three_sum,
    three_sum_closest,
    trap,
    two_sum,
    two_sum_sorted,
)


@pytest.mark.parametrize(
    "nums, target",
    [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6), ([-1, -2, -3, -4, -5], -8)],
)
def test_two_sum_finds_pair(nums, target):
    i, j = two_sum(nums, target)
    assert i < j
    assert nums[i] + nums[j] == target


def test_two_sum_without_answer():
    assert two_sum([1, 2, 3], 100) == []


def test_max_area_worked_example():
    assert max_area([1, 8, 6, 2, 5, 4, 8, 3, 7]) == 49


def test_max_area_is_best_pair():
    heights = [4, 3, 2, 1, 4, 7, 1]
    result = max_area(heights)
    pairs = combinations(range(len(heights)), 2)
    assert all(min(heights[i], heights[j]) * (j - i) <= result for i, j in pairs)
    assert any(
        min(heights[i], heights[j]) * (j - i) == result
        for i, j in combinations(range(len(heights)), 2)
    )


@pytest.mark.parametrize(
    "nums", [[-1, 0, 1, 2, -1, -4], [0, 0, 0, 0], [1, 2, -2, -1], [-2, 0, 1, 1, 2, -1, -4]]
)
def test_three_sum_sound_and_complete(nums):
    result = three_sum(nums)
    as_tuples = [tuple(t) for t in result]
    assert len(as_tuples) == len(set(as_tuples))
    for triple in result:
        assert sum(triple) == 0
        assert triple == sorted(triple)
    for combo in combinations(nums, 3):
        if sum(combo) == 0:
            assert tuple(sorted(combo)) in as_tuples


def test_three_sum_does_not_mutate_input():
    nums = [3, -1, -2]
    three_sum(nums)
    assert nums == [3, -1, -2]


@pytest.mark.parametrize(
    "nums, target", [([-1, 2, 1, -4], 1), ([1, 1, 1, 0], -100), ([4, 0, 5, -5, 3, 3, 0, -4, -5], -2)]
)
def test_three_sum_closest_is_closest(nums, target):
    result = three_sum_closest(nums, target)
    sums = [sum(c) for c in combinations(nums, 3)]
    assert result in sums
    assert abs(result - target) == min(abs(s - target) for s in sums)


def test_three_sum_closest_exact():
    assert three_sum_closest([0, 0, 0], 0) == 0


def test_three_sum_closest_too_short():
    with pytest.raises(ValueError):
        three_sum_closest([1, 2], 3)


@pytest.mark.parametrize(
    "nums, target",
    [([1, 0, -1, 0, -2, 2], 0), ([2, 2, 2, 2, 2], 8), ([1, -2, -5, -4, -3, 3, 3, 5], -11)],
)
def test_four_sum_sound_and_complete(nums, target):
    result = four_sum(nums, target)
    as_tuples = [tuple(q) for q in result]
    assert len(as_tuples) == len(set(as_tuples))
    for quad in result:
        assert sum(quad) == target
        assert quad == sorted(quad)
    for combo in combinations(nums, 4):
        if sum(combo) == target:
            assert tuple(sorted(combo)) in as_tuples


def test_four_sum_too_short():
    assert four_sum([1, 2, 3], 6) == []


def test_remove_duplicates_in_place():
    nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    original = list(nums)
    k = remove_duplicates(nums)
    assert nums[:k] == sorted(set(original))
    assert nums[k:] == original[k:]


def test_remove_duplicates_empty():
    nums = []
    assert remove_duplicates(nums) == 0


@pytest.mark.parametrize("start", [[1, 2, 3], [1, 1, 5], [2, 3, 1], [1, 3, 2, 2]])
def test_next_permutation_matches_lexicographic_order(start):
    ordered = sorted(set(permutations(start)))
    nums = list(start)
    next_permutation(nums)
    position = ordered.index(tuple(start))
    assert tuple(nums) == ordered[(position + 1) % len(ordered)]


def test_next_permutation_wraps_to_smallest():
    nums = [3, 2, 1]
    next_permutation(nums)
    assert nums == [1, 2, 3]


def test_trap_worked_example():
    assert trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


@pytest.mark.parametrize("height", [[], [1, 2, 3, 4], [4, 3, 2, 1], [5]])
def test_trap_holds_nothing(height):
    assert trap(height) == 0


def test_trap_symmetric():
    height = [4, 2, 0, 3, 2, 5]
    assert trap(height) == trap(height[::-1])


def test_max_subarray_worked_example():
    assert max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_subarray_all_negative():
    assert max_subarray([-3, -1, -2]) == -1


def test_max_subarray_is_some_run():
    nums = [5, 4, -1, 7, 8, -20, 3]
    result = max_subarray(nums)
    runs = [sum(nums[i:j]) for i in range(len(nums)) for j in range(i + 1, len(nums) + 1)]
    assert result == max(runs)


def test_max_subarray_empty():
    with pytest.raises(ValueError):
        max_subarray([])


@pytest.mark.parametrize(
    "nums, expected",
    [([2, 3, 1, 1, 4], True), ([3, 2, 1, 0, 4], False), ([0], True), ([0, 1], False)],
)
def test_can_jump(nums, expected):
    assert can_jump(nums) is expected


def test_merge_intervals():
    intervals = [[8, 10], [1, 3], [15, 18], [2, 6]]
    assert merge_intervals(intervals) == [[1, 6], [8, 10], [15, 18]]
    assert intervals == [[8, 10], [1, 3], [15, 18], [2, 6]]


def test_merge_intervals_touching():
    assert merge_intervals([[1, 4], [4, 5]]) == [[1, 5]]


@pytest.mark.parametrize("digits", [[1, 2, 3], [4, 3, 2, 1], [9], [9, 9, 9], [0]])
def test_plus_one_adds_one(digits):
    result = plus_one(digits)
    assert int("".join(map(str, result))) == int("".join(map(str, digits))) + 1
    assert all(0 <= d <= 9 for d in result)


def test_merge_sorted():
    nums1 = [1, 2, 3, 0, 0, 0]
    nums2 = [2, 5, 6]
    merge_sorted(nums1, 3, nums2, 3)
    assert nums1 == sorted([1, 2, 3, 2, 5, 6])


def test_merge_sorted_into_empty():
    nums1 = [0]
    merge_sorted(nums1, 0, [1], 1)
    assert nums1 == [1]


@pytest.mark.parametrize("nums, expected", [([2, 2, 1], 1), ([4, 1, 2, 1, 2], 4), ([1], 1)])
def test_single_number(nums, expected):
    assert single_number(nums) == expected


@pytest.mark.parametrize(
    "numbers, target", [([2, 7, 11, 15], 9), ([2, 3, 4], 6), ([-1, 0], -1)]
)
def test_two_sum_sorted(numbers, target):
    i, j = two_sum_sorted(numbers, target)
    assert 1 <= i < j <= len(numbers)
    assert numbers[i - 1] + numbers[j - 1] == target


def test_two_sum_sorted_missing():
    assert two_sum_sorted([1, 2, 3], 10) == []


@pytest.mark.parametrize("nums, expected", [([3, 2, 3], 3), ([2, 2, 1, 1, 1, 2, 2], 2)])
def test_majority_element(nums, expected):
    assert majority_element(nums) == expected


def test_majority_element_empty():
    with pytest.raises(ValueError):
        majority_element([])


@pytest.mark.parametrize("k", [0, 1, 3, 7, 10])
def test_rotate_round_trip(k):
    original = [1, 2, 3, 4, 5, 6, 7]
    nums = list(original)
    rotate(nums, k)
    assert nums[k % len(original)] == original[0]
    rotate(nums, len(original) - k % len(original))
    assert nums == original


def test_rotate_empty():
    nums = []
    rotate(nums, 3)
    assert nums == []


@pytest.mark.parametrize(
    "target, nums", [(7, [2, 3, 1, 2, 4, 3]), (4, [1, 4, 4]), (15, [1, 2, 3, 4, 5])]
)
def test_min_subarray_len_is_shortest(target, nums):
    length = min_subarray_len(target, nums)
    windows = lambda size: [sum(nums[i : i + size]) for i in range(len(nums) - size + 1)]
    assert any(total >= target for total in windows(length))
    assert all(total < target for total in windows(length - 1))


def test_min_subarray_len_impossible():
    assert min_subarray_len(11, [1, 1, 1, 1, 1, 1, 1, 1]) == 0


@pytest.mark.parametrize(
    "nums, expected", [([1, 2, 3, 1], True), ([1, 2, 3, 4], False), ([], False)]
)
def test_contains_duplicate(nums, expected):
    assert contains_duplicate(nums) is expected


@pytest.mark.parametrize("missing", [0, 4, 9])
def test_missing_number(missing):
    nums = [x for x in range(10) if x != missing]
    random.Random(missing).shuffle(nums)
    assert missing_number(nums) == missing


@pytest.mark.parametrize("nums, expected", [([1, 3, 4, 2, 2], 2), ([3, 1, 3, 4, 2], 3), ([3, 3, 3, 3, 3], 3)])
def test_find_duplicate(nums, expected):
    assert find_duplicate(nums) == expected


def test_intersection():
    a = [4, 9, 5, 9]
    b = [9, 4, 9, 8, 4]
    assert intersection(a, b) == sorted(set(a) & set(b))


def test_intersection_disjoint():
    assert intersection([1, 2], [3, 4]) == []


@pytest.mark.parametrize(
    "intervals", [[[1, 2]], [[3, 4], [2, 3], [1, 2]], [[1, 4], [2, 3], [3, 4]]]
)
def test_find_right_interval(intervals):
    result = find_right_interval(intervals)
    assert len(result) == len(intervals)
    starts = [start for start, _ in intervals]
    for (_, end), chosen in zip(intervals, result):
        candidates = [s for s in starts if s >= end]
        if chosen == -1:
            assert candidates == []
        else:
            assert starts[chosen] == min(candidates)


@pytest.mark.parametrize(
    "alice, bob", [([1, 1], [2, 2]), ([1, 2], [2, 3]), ([2], [1, 3]), ([1, 2, 5], [2, 4])]
)
def test_fair_candy_swap_balances(alice, bob):
    x, y = fair_candy_swap(alice, bob)
    assert x in alice
    assert y in bob
    assert sum(alice) - x + y == sum(bob) - y + x


def test_fair_candy_swap_impossible():
    assert fair_candy_swap([1], [2]) == []


@pytest.mark.parametrize(
    "nums", [[5, 2, 3, 1], [5, 1, 1, 2, 0, 0], [], [7], [-3, 10, -3, 0, 8, -50]]
)
def test_sort_array(nums):
    original = list(nums)
    assert sort_array(nums) == sorted(original)
    assert nums == original


def test_sort_array_random():
    rng = random.Random(1)
    nums = [rng.randint(-1000, 1000) for _ in range(500)]
    assert sort_array(nums) == sorted(nums)