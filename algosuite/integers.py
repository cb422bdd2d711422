"""Problems on single integers: digits, powers, bits and counting."""

from __future__ import annotations


def is_palindrome(x: int) -> bool:
    """Tell whether the decimal text of x reads the same backwards."""
    text = str(x)
    return text == text[::-1]


def my_pow(x: float, n: int) -> float:
    """Raise x to the integer power n by repeated squaring."""
    if n == 0:
        return 1.0
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    result = 1.0
    base = float(x)
    remaining = abs(n)
    while remaining:
        if remaining % 2 == 1:
            result *= base
        base *= base
        remaining //= 2
    return 1 / result if n < 0 else result


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb n steps taking one or two at a time."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n <= 2:
        return n
    previous, current = 1, 2
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def hamming_weight(n: int) -> int:
    """Return the number of set bits of a positive n; zero for n <= 0."""
    return n.bit_count() if n > 0 else 0


def _digit_square_sum(n: int) -> int:
    return sum(int(digit) ** 2 for digit in str(n))


def is_happy(n: int) -> bool:
    """Tell whether repeatedly summing the squares of the digits of n reaches 1."""
    if n <= 0:
        return False
    seen: set[int] = set()
    while n != 1:
        n = _digit_square_sum(n)
        if n in seen:
            return False
        seen.add(n)
    return True


def maximum_swap(num: int) -> int:
    """Return the largest number reachable by swapping at most two digits of num."""
    if num < 0:
        raise ValueError("num must not be negative")
    digits = list(str(num))
    last_index = {digit: index for index, digit in enumerate(digits)}
    for index, digit in enumerate(digits):
        for bigger in "987654321":
            if bigger <= digit:
                break
            other = last_index.get(bigger)
            if other is not None and other > index:
                digits[index], digits[other] = digits[other], digits[index]
                return int("".join(digits))
    return num