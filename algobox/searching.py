"""Binary search and its variations over sorted, rotated and mountain sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
import math


class MountainArray:
    """A read-only array that strictly rises to a single peak and then strictly falls."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = tuple(values)

    def get(self, index: int) -> int:
        """Return the value at ``index``."""
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the union of two sorted sequences.

    Raises ValueError if both sequences are empty.
    """
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    m, n = len(nums1), len(nums2)
    if m + n == 0:
        raise ValueError("median of two empty arrays is undefined")

    total_left = (m + n + 1) // 2
    low, high = 0, m
    while low <= high:
        i = (low + high) // 2
        j = total_left - i
        left1 = nums1[i - 1] if i > 0 else -math.inf
        right1 = nums1[i] if i < m else math.inf
        left2 = nums2[j - 1] if j > 0 else -math.inf
        right2 = nums2[j] if j < n else math.inf

        if left1 <= right2 and left2 <= right1:
            if (m + n) % 2 == 0:
                return (max(left1, left2) + min(right1, right2)) / 2
            return float(max(left1, left2))
        if left1 > right2:
            high = i - 1
        else:
            low = i + 1
    raise ValueError("input arrays must be sorted")


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence of distinct values, or -1."""
    start, end = 0, len(nums) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] >= nums[0]:
            if nums[start] <= target < nums[mid]:
                end = mid - 1
            else:
                start = mid + 1
        elif nums[mid] < target <= nums[end]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """Return ``[first, last]`` indices of ``target`` in a sorted sequence, or ``[-1, -1]``."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a sorted sequence, or where it would be inserted."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return low


def int_sqrt(x: int) -> int:
    """Return the integer square root of ``x``; negative input gives 0."""
    if x < 2:
        return max(x, 0)
    return math.isqrt(x)


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows, read in order, form one sorted run."""
    rows = len(matrix)
    cols = len(matrix[0])
    start, end = 0, rows * cols - 1
    while start <= end:
        mid = start + (end - start) // 2
        value = matrix[mid // cols][mid % cols]
        if value == target:
            return True
        if value < target:
            start = mid + 1
        else:
            end = mid - 1
    return False


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` is in a rotated sorted sequence that may hold duplicates."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] == target:
            return True
        if nums[left] == nums[mid] == nums[right]:
            left += 1
            right -= 1
        elif nums[left] <= nums[mid]:
            if nums[left] <= target < nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return False


def find_min_rotated(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated sorted sequence of distinct values."""
    start, end = 0, len(nums) - 1
    answer = nums[0]
    while start <= end:
        mid = start + (end - start) // 2
        if nums[mid] >= nums[0]:
            start = mid + 1
        else:
            answer = nums[mid]
            end = mid - 1
    return answer


def find_min_rotated_with_duplicates(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated sorted sequence that may hold duplicates."""
    left, right = 0, len(nums) - 1
    while left < right:
        mid = left + (right - left) // 2
        if nums[mid] < nums[right]:
            right = mid
        elif nums[mid] > nums[right]:
            left = mid + 1
        else:
            right -= 1
    return nums[left]


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of some element greater than its neighbours."""
    left, right = 0, len(nums) - 1
    while left < right:
        mid = left + (right - left) // 2
        if nums[mid] > nums[mid + 1]:
            right = mid
        else:
            left = mid + 1
    return left


def search_sorted_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows and columns are each sorted."""
    rows = len(matrix)
    row, col = 0, len(matrix[0]) - 1
    while row < rows and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            col -= 1
        else:
            row += 1
    return False


def binary_search(nums: Sequence[int], key: int) -> int:
    """Return the index of ``key`` in a sorted sequence, or -1."""
    start, end = 0, len(nums) - 1
    while start <= end:
        mid = (start + end) // 2
        if nums[mid] == key:
            return mid
        if nums[mid] < key:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def peak_index_in_mountain(arr: Sequence[int]) -> int:
    """Return the index of the peak of a mountain sequence."""
    start, end = 0, len(arr) - 1
    while start < end:
        mid = start + (end - start) // 2
        if arr[mid] < arr[mid + 1]:
            start = mid + 1
        else:
            end = mid
    return start


def _hours_needed(piles: Iterable[int], speed: int) -> int:
    return sum(-(-pile // speed) for pile in piles)


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the slowest eating speed that finishes all piles within ``h`` hours, or 0."""
    start, end = 1, max(piles, default=0)
    answer = 0
    while start <= end:
        mid = start + (end - start) // 2
        if _hours_needed(piles, mid) > h:
            start = mid + 1
        else:
            answer = mid
            end = mid - 1
    return answer


def find_in_mountain_array(target: int, mountain: MountainArray) -> int:
    """Return the smallest index of ``target`` in a mountain array, or -1."""
    n = len(mountain)
    left, right = 0, n - 1
    while left < right:
        mid = (left + right) // 2
        if mountain.get(mid) < mountain.get(mid + 1):
            left = mid + 1
        else:
            right = mid
    peak = left

    def search(low: int, high: int, ascending: bool) -> int:
        while low <= high:
            mid = (low + high) // 2
            value = mountain.get(mid)
            if value == target:
                return mid
            if (value < target) == ascending:
                low = mid + 1
            else:
                high = mid - 1
        return -1

    index = search(0, peak, ascending=True)
    if index != -1:
        return index
    return search(peak + 1, n - 1, ascending=False)


def find_kth_positive(arr: Sequence[int], k: int) -> int:
    """Return the ``k``-th positive integer missing from a strictly increasing sequence."""
    left, right = 0, len(arr) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if arr[mid] - (mid + 1) < k:
            left = mid + 1
        else:
            right = mid - 1
    return k + left


def _can_place(position: Sequence[int], m: int, dist: int) -> bool:
    count = 1
    last = position[0]
    for pos in position[1:]:
        if pos - last >= dist:
            count += 1
            last = pos
        if count >= m:
            return True
    return False


def max_distance(position: Iterable[int], m: int) -> int:
    """Return the largest minimum gap achievable when placing ``m`` balls in the baskets."""
    ordered = sorted(position)
    left, right = 1, ordered[-1] - ordered[0]
    answer = 0
    while left <= right:
        mid = left + (right - left) // 2
        if _can_place(ordered, m, mid):
            answer = mid
            left = mid + 1
        else:
            right = mid - 1
    return answer