"""Classic problems over integer sequences: sums, intervals, rotation and sorting."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from functools import reduce
from operator import xor


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return indices ``[i, j]`` with ``i < j`` whose values add up to ``target``, or ``[]``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return [seen[complement], index]
        seen[value] = index
    return []


def max_area(height: Sequence[int]) -> int:
    """Return the most water a pair of lines can hold between them."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct sorted triplet of values that adds up to zero."""
    ordered = sorted(nums)
    n = len(ordered)
    result: list[list[int]] = []
    for i in range(n - 2):
        if i > 0 and ordered[i] == ordered[i - 1]:
            continue
        left, right = i + 1, n - 1
        while left < right:
            total = ordered[i] + ordered[left] + ordered[right]
            if total == 0:
                result.append([ordered[i], ordered[left], ordered[right]])
                while left < right and ordered[left] == ordered[left + 1]:
                    left += 1
                while left < right and ordered[right] == ordered[right - 1]:
                    right -= 1
                left += 1
                right -= 1
            elif total < 0:
                left += 1
            else:
                right -= 1
    return result


def three_sum_closest(nums: Iterable[int], target: int) -> int:
    """Return the sum of three values that lies closest to ``target``.

    Raises ValueError if fewer than three values are given.
    """
    ordered = sorted(nums)
    n = len(ordered)
    if n < 3:
        raise ValueError("at least three numbers are required")
    closest = ordered[0] + ordered[1] + ordered[2]
    for i in range(n - 2):
        left, right = i + 1, n - 1
        while left < right:
            total = ordered[i] + ordered[left] + ordered[right]
            if abs(total - target) < abs(closest - target):
                closest = total
            if total < target:
                left += 1
            elif total > target:
                right -= 1
            else:
                return total
    return closest


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Return every distinct sorted quadruplet of values that adds up to ``target``."""
    ordered = sorted(nums)
    n = len(ordered)
    result: list[list[int]] = []
    for i in range(n - 3):
        if i > 0 and ordered[i] == ordered[i - 1]:
            continue
        for j in range(i + 1, n - 2):
            if j > i + 1 and ordered[j] == ordered[j - 1]:
                continue
            left, right = j + 1, n - 1
            while left < right:
                total = ordered[i] + ordered[j] + ordered[left] + ordered[right]
                if total == target:
                    result.append([ordered[i], ordered[j], ordered[left], ordered[right]])
                    left += 1
                    right -= 1
                    while left < right and ordered[left] == ordered[left - 1]:
                        left += 1
                    while left < right and ordered[right] == ordered[right + 1]:
                        right -= 1
                elif total < target:
                    left += 1
                else:
                    right -= 1
    return result


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Move the distinct values of a sorted sequence to its front and return their count.

    Elements past the returned count are left as they were.
    """
    unique: list[int] = []
    for value in nums:
        if not unique or value != unique[-1]:
            unique.append(value)
    nums[: len(unique)] = unique
    return len(unique)


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` in place into the next lexicographic permutation, wrapping around."""
    n = len(nums)
    i = n - 2
    while i >= 0 and nums[i] >= nums[i + 1]:
        i -= 1
    if i >= 0:
        j = n - 1
        while nums[j] <= nums[i]:
            j -= 1
        nums[i], nums[j] = nums[j], nums[i]
    nums[i + 1 :] = nums[i + 1 :][::-1]


def trap(height: Sequence[int]) -> int:
    """Return how much rain water is trapped between the bars."""
    if not height:
        return 0
    peak = max(range(len(height)), key=height.__getitem__)

    def collect(bars: Iterable[int]) -> int:
        water = 0
        level = 0
        for bar in bars:
            if level > bar:
                water += level - bar
            else:
                level = bar
        return water

    return collect(height[:peak]) + collect(reversed(height[peak + 1 :]))


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run.

    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("sequence must not be empty")
    current = 0
    best = nums[0]
    for value in nums:
        current += value
        best = max(best, current)
        if current < 0:
            current = 0
    return best


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index is reachable when each value is a maximum jump length."""
    reachable = 0
    for index, step in enumerate(nums):
        if index > reachable:
            return False
        reachable = max(reachable, index + step)
    return True


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals and return them sorted."""
    merged: list[list[int]] = []
    for start, end in sorted(list(interval) for interval in intervals):
        if not merged or merged[-1][1] < start:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged


def plus_one(digits: Sequence[int]) -> list[int]:
    """Return the digits of the number one greater than the one ``digits`` spell."""
    result = list(digits)
    for index in reversed(range(len(result))):
        if result[index] < 9:
            result[index] += 1
            return result
        result[index] = 0
    return [1, *result]


def merge_sorted(nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``, in place."""
    i, j, k = m - 1, n - 1, m + n - 1
    while j >= 0:
        if i >= 0 and nums1[i] > nums2[j]:
            nums1[k] = nums1[i]
            i -= 1
        else:
            nums1[k] = nums2[j]
            j -= 1
        k -= 1


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return 1-based indices ``[i, j]`` in a sorted sequence adding up to ``target``, or ``[]``."""
    start, end = 0, len(numbers) - 1
    while start < end:
        total = numbers[start] + numbers[end]
        if total == target:
            return [start + 1, end + 1]
        if total < target:
            start += 1
        else:
            end -= 1
    return []


def majority_element(nums: Iterable[int]) -> int:
    """Return the value that appears in more than half of the positions.

    Raises ValueError for an empty sequence.
    """
    candidate: int | None = None
    count = 0
    for value in nums:
        if count == 0:
            candidate, count = value, 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if candidate is None:
        raise ValueError("sequence must not be empty")
    return candidate


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` steps, in place."""
    n = len(nums)
    if n == 0:
        return
    k %= n
    if k:
        nums[:] = [*nums[n - k :], *nums[: n - k]]


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Return the length of the shortest run summing to at least ``target``, or 0."""
    best = len(nums) + 1
    total = 0
    left = 0
    for right, value in enumerate(nums):
        total += value
        while total >= target:
            best = min(best, right - left + 1)
            total -= nums[left]
            left += 1
    return 0 if best == len(nums) + 1 else best


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Tell whether any value appears more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def missing_number(nums: Sequence[int]) -> int:
    """Return the one value of ``0..len(nums)`` that ``nums`` lacks."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the repeated value among ``n + 1`` values drawn from ``1..n``."""
    slow = fast = nums[0]
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    slow = nums[0]
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return slow


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the distinct values found in both sequences, in ascending order."""
    return sorted(set(nums1) & set(nums2))


def find_right_interval(intervals: Sequence[Sequence[int]]) -> list[int]:
    """For each interval, return the index of the interval with the smallest start not below its end, or -1."""
    starts = sorted((interval[0], index) for index, interval in enumerate(intervals))
    result: list[int] = []
    for _, end in intervals:
        position = bisect_left(starts, (end, -1))
        result.append(starts[position][1] if position < len(starts) else -1)
    return result


def fair_candy_swap(alice_sizes: Sequence[int], bob_sizes: Sequence[int]) -> list[int]:
    """Return ``[x, y]`` so that swapping Alice's ``x`` for Bob's ``y`` evens the totals, or ``[]``."""
    difference = sum(bob_sizes) - sum(alice_sizes)
    delta = abs(difference) // 2 * (1 if difference >= 0 else -1)
    bob_set = set(bob_sizes)
    for x in alice_sizes:
        if x + delta in bob_set:
            return [x, x + delta]
    return []


def _merge_runs(left: list[int], right: list[int]) -> Iterator[int]:
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            yield left[i]
            i += 1
        else:
            yield right[j]
            j += 1
    yield from left[i:]
    yield from right[j:]


def sort_array(nums: Sequence[int]) -> list[int]:
    """Return the values of ``nums`` in ascending order, by merge sort."""
    values = list(nums)
    if len(values) < 2:
        return values
    mid = (len(values) + 1) // 2
    return list(_merge_runs(sort_array(values[:mid]), sort_array(values[mid:])))