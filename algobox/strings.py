"""String algorithms: palindromes, parsing, pattern matching and digit arithmetic."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence
from itertools import takewhile, zip_longest
from string import ascii_lowercase

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)
_DIGITS = frozenset("0123456789")
_BRACKET_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset("([{")
_VOWELS = frozenset("aeiouAEIOU")


def _is_ascii_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def longest_palindromic_substring(s: str) -> str:
    """Return the first longest palindromic substring of ``s``."""
    n = len(s)
    if n < 2:
        return s

    def expand(left: int, right: int) -> int:
        while left >= 0 and right < n and s[left] == s[right]:
            left -= 1
            right += 1
        return right - left - 1

    start, best = 0, 1
    for center in range(n):
        length = max(expand(center, center), expand(center, center + 1))
        if length > best:
            best = length
            start = center - (length - 1) // 2
    return s[start : start + best]


def my_atoi(s: str) -> int:
    """Parse a leading signed decimal integer, clamped to the 32-bit signed range.

    Leading spaces are skipped; parsing stops at the first non-digit, and a
    string with no digits gives 0.
    """
    text = s.lstrip(" ")
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]

    number = 0
    for ch in takewhile(lambda c: c in _DIGITS, text):
        number = number * 10 + int(ch)
        if sign * number > _INT_MAX:
            return _INT_MAX
        if sign * number < _INT_MIN:
            return _INT_MIN
    return sign * number


def is_match(s: str, p: str) -> bool:
    """Tell whether pattern ``p`` matches all of ``s``.

    ``.`` matches any single character and ``*`` matches zero or more of the
    element before it. Raises ValueError if the pattern starts with ``*``.
    """
    if p.startswith("*"):
        raise ValueError("pattern must not start with '*'")
    n, m = len(s), len(p)
    dp = [[False] * (m + 1) for _ in range(n + 1)]
    dp[0][0] = True
    for j in range(2, m + 1):
        if p[j - 1] == "*":
            dp[0][j] = dp[0][j - 2]

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            token = p[j - 1]
            if token == "." or token == s[i - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            elif token == "*":
                dp[i][j] = dp[i][j - 2] or (
                    p[j - 2] in (".", s[i - 1]) and dp[i - 1][j]
                )
    return dp[n][m]


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string, or an empty string."""
    if not strs:
        return ""
    prefix = strs[0]
    for word in strs[1:]:
        while not word.startswith(prefix):
            prefix = prefix[:-1]
        if not prefix:
            return ""
    return prefix


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed by the matching kind in the right order."""
    stack: list[str] = []
    for ch in s:
        if ch in _OPENING:
            stack.append(ch)
        elif not stack or stack.pop() != _BRACKET_PAIRS.get(ch):
            return False
    return not stack


def multiply_strings(num1: str, num2: str) -> str:
    """Multiply two non-negative decimal numbers given as strings."""
    if num1 == "0" or num2 == "0":
        return "0"
    digits = [0] * (len(num1) + len(num2))
    for i, a in reversed(list(enumerate(num1))):
        for j, b in reversed(list(enumerate(num2))):
            total = int(a) * int(b) + digits[i + j + 1]
            digits[i + j + 1] = total % 10
            digits[i + j] += total // 10
    return "".join(map(str, digits)).lstrip("0") or "0"


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word of ``s``."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def add_binary(a: str, b: str) -> str:
    """Add two binary numbers given as strings."""
    bits: list[str] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, bit = divmod(int(x) + int(y) + carry, 2)
        bits.append(str(bit))
    if carry:
        bits.append("1")
    return "".join(reversed(bits))


def simplify_path(path: str) -> str:
    """Return the canonical form of an absolute Unix-style path."""
    parts: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if parts:
                parts.pop()
        else:
            parts.append(part)
    return "/" + "/".join(parts)


def is_alphanumeric_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways, ignoring case and non-alphanumerics."""
    chars = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return chars == chars[::-1]


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Tell whether ``s`` splits into a sequence of words from ``word_dict``."""
    words = set(word_dict)
    n = len(s)
    reachable = [True] + [False] * n
    for end in range(1, n + 1):
        reachable[end] = any(
            reachable[start] and s[start:end] in words for start in range(end)
        )
    return reachable[n]


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` is a rearrangement of the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def reverse_string(chars: MutableSequence[str]) -> None:
    """Reverse a sequence of characters in place."""
    chars.reverse()


def longest_palindrome_length(s: str) -> int:
    """Return the length of the longest palindrome that can be built from the characters of ``s``."""
    counts = list(Counter(s).values())
    paired = sum(count // 2 * 2 for count in counts)
    return paired + (1 if any(count % 2 for count in counts) else 0)


def add_strings(num1: str, num2: str) -> str:
    """Add two non-negative decimal numbers given as strings."""
    digits: list[str] = []
    carry = 0
    for x, y in zip_longest(reversed(num1), reversed(num2), fillvalue="0"):
        carry, digit = divmod(int(x) + int(y) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def reverse_only_letters(s: str) -> str:
    """Reverse the order of the ASCII letters of ``s``, leaving other characters in place."""
    letters = [ch for ch in s if _is_ascii_letter(ch)]
    return "".join(letters.pop() if _is_ascii_letter(ch) else ch for ch in s)


def defang_ip_address(address: str) -> str:
    """Replace every ``.`` of an address with ``[.]``."""
    return address.replace(".", "[.]")


def is_pangram(sentence: str) -> bool:
    """Tell whether every lowercase English letter appears in ``sentence``."""
    return set(ascii_lowercase) <= set(sentence)


def sort_vowels(s: str) -> str:
    """Sort the vowels of ``s`` by character code, keeping consonants in place."""
    ordered = iter(sorted(ch for ch in s if ch in _VOWELS))
    return "".join(next(ordered) if ch in _VOWELS else ch for ch in s)