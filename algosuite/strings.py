"""String problems: palindromes, roman numerals, words, binary sums and letter budgets."""

from __future__ import annotations

import heapq
from collections import Counter
from itertools import zip_longest

_THOUSANDS = ("", "M", "MM", "MMM")
_HUNDREDS = ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM")
_TENS = ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC")
_ONES = ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX")

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def _expand(s: str, left: int, right: int) -> tuple[int, int]:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return left + 1, right - left - 1


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring; among equals, the one starting first."""
    best_start, best_length = 0, 0
    for center in range(len(s)):
        for start, length in (_expand(s, center, center), _expand(s, center, center + 1)):
            if length > best_length or (length == best_length and start < best_start):
                best_start, best_length = start, length
    return s[best_start:best_start + best_length]


def int_to_roman(num: int) -> str:
    """Write num, from 0 to 3999, as a roman numeral; zero gives the empty string."""
    if not 0 <= num <= 3999:
        raise ValueError(f"num must be between 0 and 3999, got {num}")
    return (
        _THOUSANDS[num // 1000]
        + _HUNDREDS[num % 1000 // 100]
        + _TENS[num % 100 // 10]
        + _ONES[num % 10]
    )


def roman_to_int(s: str) -> int:
    """Read a roman numeral, subtracting a symbol that precedes a larger one."""
    try:
        values = [_ROMAN_VALUES[symbol] for symbol in s]
    except KeyError as exc:
        raise ValueError(f"not a roman symbol: {exc.args[0]!r}") from None
    total = 0
    for value, following in zip_longest(values, values[1:], fillvalue=0):
        total += -value if value < following else value
    return total


def length_of_last_word(s: str) -> int:
    """Return the length of the last whitespace-separated word."""
    words = s.split()
    if not words:
        raise ValueError("text holds no words")
    return len(words[-1])


def add_binary(a: str, b: str) -> str:
    """Add two binary strings digit by digit, keeping the width of the longer one."""
    digits: list[str] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        if x not in "01" or y not in "01":
            raise ValueError("binary strings may hold only 0 and 1")
        carry, digit = divmod(int(x) + int(y) + carry, 2)
        digits.append(str(digit))
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def reverse_words(s: str) -> str:
    """Return the words of s in reverse order, separated by single spaces."""
    words = s.split()
    if not words:
        raise ValueError("text holds no words")
    return " ".join(reversed(words))


def _first_seen_indices(items) -> list[int]:
    order: dict = {}
    return [order.setdefault(item, len(order)) for item in items]


def word_pattern(pattern: str, s: str) -> bool:
    """Tell whether the words of s follow the letters of pattern one to one."""
    words = s.split()
    if len(pattern) != len(words):
        return False
    return _first_seen_indices(pattern) == _first_seen_indices(words)


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Tell whether the note can be built using each magazine letter at most once."""
    return not Counter(ransom_note) - Counter(magazine)


def longest_diverse_string(a: int, b: int, c: int) -> str:
    """Build a long string of at most a 'a's, b 'b's and c 'c's with no letter three times in a row."""
    heap = [(-count, -ord(letter), letter) for count, letter in ((a, "a"), (b, "b"), (c, "c")) if count > 0]
    heapq.heapify(heap)
    result: list[str] = []
    while heap:
        negative, rank, letter = heapq.heappop(heap)
        count = -negative
        if len(result) >= 2 and result[-1] == letter and result[-2] == letter:
            if not heap:
                break
            next_negative, next_rank, next_letter = heapq.heappop(heap)
            result.append(next_letter)
            next_count = -next_negative - 1
            if next_count > 0:
                heapq.heappush(heap, (-next_count, next_rank, next_letter))
        else:
            result.append(letter)
            count -= 1
        if count > 0:
            heapq.heappush(heap, (-count, rank, letter))
    return "".join(result)