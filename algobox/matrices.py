"""Grid algorithms: rotation, spiral traversal, word search and dynamic programming."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _rotated(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    return [list(column) for column in zip(*matrix[::-1])]


def rotate_matrix(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise, in place."""
    for row, new_row in zip(matrix, _rotated(matrix)):
        row[:] = new_row


def _spiral_positions(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    top, bottom, left, right = 0, rows - 1, 0, cols - 1
    while top <= bottom and left <= right:
        for col in range(left, right + 1):
            yield top, col
        top += 1
        for row in range(top, bottom + 1):
            yield row, right
        right -= 1
        if top <= bottom:
            for col in range(right, left - 1, -1):
                yield bottom, col
            bottom -= 1
        if left <= right:
            for row in range(bottom, top - 1, -1):
                yield row, left
            left += 1


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of the matrix in clockwise spiral order from the top left."""
    if not matrix or not matrix[0]:
        return []
    return [matrix[r][c] for r, c in _spiral_positions(len(matrix), len(matrix[0]))]


def generate_spiral_matrix(n: int) -> list[list[int]]:
    """Return an ``n`` by ``n`` matrix filled with 1..n*n in clockwise spiral order."""
    matrix = [[0] * n for _ in range(n)]
    for number, (r, c) in enumerate(_spiral_positions(n, n), start=1):
        matrix[r][c] = number
    return matrix


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether ``word`` can be traced through adjacent cells, using each cell once."""
    rows = len(board)
    cols = len(board[0]) if rows else 0
    used: set[tuple[int, int]] = set()

    def dfs(r: int, c: int, index: int) -> bool:
        if index == len(word):
            return True
        if not (0 <= r < rows and 0 <= c < cols):
            return False
        if (r, c) in used or board[r][c] != word[index]:
            return False
        used.add((r, c))
        found = any(dfs(r + dr, c + dc, index + 1) for dr, dc in _STEPS)
        used.discard((r, c))
        return found

    return any(dfs(r, c, 0) for r in range(rows) for c in range(cols))


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Return the smallest top-to-bottom path sum, stepping to an adjacent index each row.

    Raises ValueError for an empty triangle.
    """
    if not triangle:
        raise ValueError("triangle must not be empty")
    best = list(triangle[-1])
    for row in reversed(triangle[:-1]):
        best = [value + min(best[j], best[j + 1]) for j, value in enumerate(row)]
    return best[0]


def maximal_square(matrix: Sequence[Sequence[str]]) -> int:
    """Return the area of the largest square of ``"1"`` cells."""
    if not matrix:
        return 0
    cols = len(matrix[0])
    previous = [0] * (cols + 1)
    best = 0
    for row in matrix:
        current = [0] * (cols + 1)
        for j, cell in enumerate(row, start=1):
            if cell == "1":
                current[j] = 1 + min(previous[j], current[j - 1], previous[j - 1])
                best = max(best, current[j])
        previous = current
    return best * best


def diagonal_sum(mat: Sequence[Sequence[int]]) -> int:
    """Return the sum of both diagonals of a square matrix, counting the centre once."""
    n = len(mat)
    total = sum(row[i] + row[n - 1 - i] for i, row in enumerate(mat))
    if n % 2:
        total -= mat[n // 2][n // 2]
    return total


def find_rotation(mat: Sequence[Sequence[int]], target: Sequence[Sequence[int]]) -> bool:
    """Tell whether some quarter-turn rotation of ``mat`` equals ``target``."""
    current = [list(row) for row in mat]
    goal = [list(row) for row in target]
    for _ in range(4):
        if current == goal:
            return True
        current = _rotated(current)
    return False