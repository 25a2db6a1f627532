import itertools
import math

import pytest

from algobox.combinatorics import combination_sum, generate_parenthesis, permute, subsets
from algobox.strings import is_valid_parentheses
from algobox.trees import num_trees


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_generate_parenthesis_counts_and_validity(n):
    result = generate_parenthesis(n)
    assert len(result) == num_trees(n)
    assert len(set(result)) == len(result)
    assert all(len(s) == 2 * n and is_valid_parentheses(s) for s in result)


def test_generate_parenthesis_order():
    result = generate_parenthesis(3)
    assert result[0] == "(" * 3 + ")" * 3
    assert result[-1] == "()" * 3
    assert result == sorted(result)


def test_generate_parenthesis_zero():
    assert generate_parenthesis(0) == [""]


def test_combination_sum_example():
    assert combination_sum([2, 3, 6, 7], 7) == [[2, 2, 3], [7]]


def test_combination_sum_invariants():
    candidates = [2, 3, 5]
    result = combination_sum(candidates, 8)
    assert result
    assert all(sum(combo) == 8 for combo in result)
    assert all(combo == sorted(combo) for combo in result)
    assert all(set(combo) <= set(candidates) for combo in result)
    assert len({tuple(c) for c in result}) == len(result)


def test_combination_sum_unreachable():
    assert not combination_sum([2], 1)


def test_combination_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum([0, 1], 3)


@pytest.mark.parametrize("nums", [[1, 2, 3], [0, 1], [1], [4, 5, 6, 7]])
def test_permute_produces_all_orderings(nums):
    result = permute(nums)
    assert len(result) == math.factorial(len(nums))
    assert sorted(result) == sorted(list(p) for p in itertools.permutations(nums))
    assert result[0] == nums


def test_permute_does_not_modify_input():
    nums = [3, 1, 2]
    permute(nums)
    assert nums == [3, 1, 2]


def test_subsets_order():
    assert subsets([1, 2, 3]) == [[], [1], [1, 2], [1, 2, 3], [1, 3], [2], [2, 3], [3]]


@pytest.mark.parametrize("nums", [[], [0], [1, 2, 3, 4]])
def test_subsets_is_power_set(nums):
    result = subsets(nums)
    assert len(result) == 2 ** len(nums)
    expected = {
        frozenset(combo)
        for size in range(len(nums) + 1)
        for combo in itertools.combinations(nums, size)
    }
    assert {frozenset(s) for s in result} == expected
    assert result[0] == []