"""Integer puzzles: digit reversal, Roman numerals, division, powers and bit tricks."""

from __future__ import annotations

from functools import lru_cache
from itertools import product
import math
import operator

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)

_ROMAN_TABLE = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)
_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_OPERATORS = {"+": operator.add, "-": operator.sub, "*": operator.mul}


def _check_int32(name: str, value: int) -> None:
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"{name} is outside the 32-bit signed range: {value}")


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of a 32-bit integer, or return 0 if the result overflows.

    Raises ValueError if ``x`` itself is outside the 32-bit signed range.
    """
    _check_int32("x", x)
    sign = -1 if x < 0 else 1
    remaining = abs(x)
    result = 0
    while remaining:
        remaining, digit = divmod(remaining, 10)
        if result > _INT_MAX // 10:
            return 0
        result = result * 10 + digit
    return sign * result


def is_palindrome_number(x: int) -> bool:
    """Tell whether the decimal digits of ``x`` read the same both ways; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def int_to_roman(num: int) -> str:
    """Write ``num`` as a Roman numeral; values below 1 give an empty string."""
    parts: list[str] = []
    for value, symbol in _ROMAN_TABLE:
        if num <= 0:
            break
        count, num = divmod(num, value)
        parts.append(symbol * count)
    return "".join(parts)


def roman_to_int(s: str) -> int:
    """Return the value of a Roman numeral.

    Raises ValueError on a character that is not a Roman digit.
    """
    try:
        values = [_ROMAN_VALUES[ch] for ch in s]
    except KeyError as exc:
        raise ValueError(f"not a Roman digit: {exc.args[0]!r}") from None
    total = 0
    for current, following in zip(values, values[1:] + [0]):
        total += -current if current < following else current
    return total


def divide(dividend: int, divisor: int) -> int:
    """Divide two 32-bit integers, truncating toward zero and clamping to the 32-bit range.

    Raises ZeroDivisionError for a zero divisor and ValueError for out-of-range operands.
    """
    _check_int32("dividend", dividend)
    _check_int32("divisor", divisor)
    if divisor == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return min(quotient, _INT_MAX)


def my_pow(x: float, n: int) -> float:
    """Raise ``x`` to the integer power ``n`` by repeated squaring."""
    power = n
    if power < 0:
        x = 1 / x
        power = -power
    result = 1.0
    while power:
        if power & 1:
            result *= x
        x *= x
        power >>= 1
    return result


def trailing_zeroes(n: int) -> int:
    """Return the number of trailing zeros of ``n!``."""
    count = 0
    while n >= 5:
        n //= 5
        count += n
    return count


def _digit_square_sum(n: int) -> int:
    return sum(int(digit) ** 2 for digit in str(abs(n)))


def is_happy(n: int) -> bool:
    """Tell whether repeatedly summing the squares of the digits of ``n`` reaches 1."""
    slow = fast = n
    while True:
        slow = _digit_square_sum(slow)
        fast = _digit_square_sum(_digit_square_sum(fast))
        if slow == fast:
            return slow == 1


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def diff_ways_to_compute(expression: str) -> list[int]:
    """Return the value of every way to parenthesise an expression of ``+``, ``-`` and ``*``.

    Raises ValueError if an operand is not an integer.
    """

    @lru_cache(maxsize=None)
    def solve(expr: str) -> tuple[int, ...]:
        results: list[int] = []
        for index, ch in enumerate(expr):
            op = _OPERATORS.get(ch)
            if op is None:
                continue
            left = solve(expr[:index])
            right = solve(expr[index + 1 :])
            results.extend(op(a, b) for a in left for b in right)
        if not results:
            return (int(expr),)
        return tuple(results)

    return list(solve(expression))


def can_win_nim(n: int) -> bool:
    """Tell whether the first player wins Nim with ``n`` stones, taking 1 to 3 per turn."""
    return n % 4 != 0


def bitwise_complement(n: int) -> int:
    """Flip every bit of the binary form of ``n``; zero gives one.

    Raises ValueError for a negative ``n``.
    """
    if n < 0:
        raise ValueError(f"n must not be negative: {n}")
    if n == 0:
        return 1
    return n ^ ((1 << n.bit_length()) - 1)


def count_triples(n: int) -> int:
    """Count ordered triples ``(a, b, c)`` within ``1..n`` where ``a*a + b*b == c*c``."""
    count = 0
    for a, b in product(range(1, n + 1), repeat=2):
        square = a * a + b * b
        c = math.isqrt(square)
        if c <= n and c * c == square:
            count += 1
    return count