"""Backtracking enumerations: bracket sequences, combinations, permutations and subsets."""

from __future__ import annotations

from collections.abc import Iterable


def generate_parenthesis(n: int) -> list[str]:
    """Return every well-formed string of ``n`` bracket pairs, ``(`` tried before ``)``."""
    result: list[str] = []

    def build(current: str, opened: int, closed: int) -> None:
        if len(current) == 2 * n:
            result.append(current)
            return
        if opened < n:
            build(current + "(", opened + 1, closed)
        if closed < opened:
            build(current + ")", opened, closed + 1)

    build("", 0, 0)
    return result


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return every combination of candidates, each reusable, that adds up to ``target``.

    Raises ValueError if a candidate is not positive.
    """
    values = list(candidates)
    if any(value <= 0 for value in values):
        raise ValueError("candidates must be positive")
    result: list[list[int]] = []
    current: list[int] = []

    def solve(index: int, remaining: int) -> None:
        if remaining == 0:
            result.append(list(current))
            return
        if index == len(values) or remaining < 0:
            return
        current.append(values[index])
        solve(index, remaining - values[index])
        current.pop()
        solve(index + 1, remaining)

    solve(0, target)
    return result


def permute(nums: Iterable[int]) -> list[list[int]]:
    """Return every ordering of ``nums``, generated by successive swaps."""
    items = list(nums)
    result: list[list[int]] = []

    def backtrack(start: int) -> None:
        if start == len(items):
            result.append(list(items))
            return
        for i in range(start, len(items)):
            items[start], items[i] = items[i], items[start]
            backtrack(start + 1)
            items[start], items[i] = items[i], items[start]

    backtrack(0)
    return result


def subsets(nums: Iterable[int]) -> list[list[int]]:
    """Return every subset of ``nums`` in depth-first order, starting with the empty one."""
    items = list(nums)
    result: list[list[int]] = []
    current: list[int] = []

    def generate(index: int) -> None:
        result.append(list(current))
        for i in range(index, len(items)):
            current.append(items[i])
            generate(i + 1)
            current.pop()

    generate(0)
    return result