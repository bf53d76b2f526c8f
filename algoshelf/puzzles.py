"""Small contest and interview problems: prefix sums, windows, counting."""

from __future__ import annotations

import bisect
import math
from itertools import accumulate

MODULUS = 10**9 + 7


class PrefixSums:
    """Answers inclusive 1-based range sums over a fixed sequence."""

    def __init__(self, values):
        self._sums = [0, *accumulate(values)]

    def range_sum(self, left, right):
        """Sum of the elements at positions ``left..right`` (1-based, inclusive)."""
        if not 1 <= left <= right + 1 or right >= len(self._sums):
            raise IndexError(f"range {left}..{right} out of bounds")
        return self._sums[right] - self._sums[left - 1]


def count_tight_groups(values, m, k):
    """Count ways to pick ``m`` values whose spread is at most ``k``.

    Each binomial term is reduced modulo 10**9+7 before it is added or
    subtracted; the running total itself is not reduced.
    """
    data = sorted(values)
    n = len(data)
    starts = [i for i, value in enumerate(data) if i == 0 or value != data[i - 1]]
    total = 0
    right = 0
    for left in starts:
        if left > n - m:
            break
        previous = right
        right = max(bisect.bisect_right(data, data[left] + k) - 1, 0)
        if data[right] - data[left] <= k:
            total += math.comb(right - left + 1, m) % MODULUS
            if previous - left + 1 >= m:
                total -= math.comb(previous - left + 1, m) % MODULUS
    return total


def multiple_reward(n, a, b, p, q):
    """Reward for 1..n where multiples of a pay p, of b pay q, of both the larger."""
    lcm = a * b // math.gcd(a, b)
    return n // a * p + n // b * q - n // lcm * min(p, q)


def nth_even_digit_number(n):
    """The n-th (1-based) non-negative integer whose decimal digits are all even."""
    n -= 1
    digits = []
    while True:
        n, rest = divmod(n, 5)
        digits.append(str(rest * 2))
        if n == 0:
            break
    return int("".join(reversed(digits)))


def count_repdigits_upto(number):
    """How many numbers from 1 to ``number`` consist of one repeated digit."""
    text = str(number)
    first = int(text[0])
    repdigit = text[0] * len(text)
    count = (len(text) - 1) * 9
    return count + (first if text >= repdigit else first - 1)


def min_subarray_len(target, nums):
    """Length of the shortest contiguous run summing to at least ``target``; 0 if none."""
    best = None
    total = 0
    left = 0
    for right, value in enumerate(nums):
        total += value
        while total >= target:
            length = right - left + 1
            best = length if best is None else min(best, length)
            total -= nums[left]
            left += 1
    return 0 if best is None else best


def length_of_longest_substring(text):
    """Length of the longest substring without repeated characters."""
    seen = {}
    best = 0
    left = 0
    for right, ch in enumerate(text):
        seen[ch] = seen.get(ch, 0) + 1
        while seen[ch] > 1:
            seen[text[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best