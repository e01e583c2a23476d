"""Solutions to the first ten Project Euler problems."""

from __future__ import annotations

import argparse
import math
from itertools import count
from typing import Callable

THOUSAND_DIGITS = (
    "73167176531330624919225119674426574742355349194934"
    "96983520312774506326239578318016984801869478851843"
    "85861560789112949495459501737958331952853208805511"
    "12540698747158523863050715693290963295227443043557"
    "66896648950445244523161731856403098711121722383113"
    "62229893423380308135336276614282806444486645238749"
    "30358907296290491560440772390713810515859307960866"
    "70172427121883998797908792274921901699720888093776"
    "65727333001053367881220235421809751254540594752243"
    "52584907711670556013604839586446706324415722155397"
    "53697817977846174064955149290862569321978468622482"
    "83972241375657056057490261407972968652414535100474"
    "82166370484403199890008895243450658541227588666881"
    "16427171479924442928230863465674813919123162824586"
    "17866458359124566529476545682848912883142607690042"
    "24219022671055626321111109370544217506941658960408"
    "07198403850962455444362981230987879927244284909188"
    "84580156166097919133875499200524063689912560717606"
    "05886116467109405077541002256983155200055935729725"
    "71636269561882670428252483600823257530420752963450"
)

_DECIMAL_DIGITS = frozenset("0123456789")


def sum_of_multiples(limit: int) -> int:
    """Sum the numbers below ``limit`` that are multiples of 3 or 5."""
    return sum(n for n in range(limit) if n % 3 == 0 or n % 5 == 0)


def _fibonacci():
    first, second = 1, 2
    while True:
        yield first
        first, second = second, first + second


def even_fibonacci_sum(limit: int) -> int:
    """Sum the even Fibonacci terms (1, 2, 3, 5, ...) below ``limit``."""
    total = 0
    for term in _fibonacci():
        if term >= limit:
            return total
        if term % 2 == 0:
            total += term


def is_prime(number: int) -> bool:
    """Tell whether ``number`` is prime, by trial division."""
    if number <= 1:
        return False
    return all(number % d for d in range(2, math.isqrt(number) + 1))


def largest_prime_factor(number: int) -> int:
    """Return the largest prime factor of ``number``."""
    if number < 2:
        raise ValueError("number must be at least 2")
    remaining = number
    largest = 1
    factor = 2
    while factor * factor <= remaining:
        while remaining % factor == 0:
            largest = factor
            remaining //= factor
        factor += 1
    return remaining if remaining > 1 else largest


def is_palindrome(number: int) -> bool:
    """Tell whether the decimal digits of ``number`` read the same both ways."""
    digits = str(abs(number))
    return digits == digits[::-1]


def largest_palindrome_product(low: int, high: int) -> int:
    """Largest palindrome that is a product of two factors in ``[low, high)``; 0 if none."""
    return max(
        (
            i * j
            for i in range(low, high)
            for j in range(i, high)
            if is_palindrome(i * j)
        ),
        default=0,
    )


def smallest_evenly_divisible(limit: int) -> int:
    """Smallest positive number divisible by every integer from 1 to ``limit``."""
    if limit < 1:
        raise ValueError("limit must be positive")
    return math.lcm(*range(1, limit + 1))


def sum_square_difference(limit: int) -> int:
    """Square of the sum of 0..limit minus the sum of their squares."""
    numbers = range(limit + 1)
    return sum(numbers) ** 2 - sum(n * n for n in numbers)


def nth_prime(n: int) -> int:
    """Return the ``n``-th prime, counting 2 as the first."""
    if n < 1:
        raise ValueError("n must be positive")
    found = 0
    for candidate in count(2):
        if is_prime(candidate):
            found += 1
            if found == n:
                return candidate
    raise AssertionError("unreachable")


def largest_adjacent_product(digits: str, span: int) -> int:
    """Greatest product of ``span`` consecutive digits in the string ``digits``."""
    if not set(digits) <= _DECIMAL_DIGITS:
        raise ValueError("digits must contain only 0-9")
    if not 1 <= span <= len(digits):
        raise ValueError("span must be between 1 and the number of digits")
    values = [int(c) for c in digits]
    return max(
        math.prod(values[start:start + span])
        for start in range(len(values) - span + 1)
    )


def pythagorean_triplet_product(perimeter: int) -> int:
    """Product a*b*c of the Pythagorean triplet a < b < c with a + b + c == perimeter."""
    found = None
    for a in range(1, perimeter // 3 + 1):
        for b in range(a + 1, (perimeter - a) // 2 + 1):
            c = perimeter - a - b
            if c > b and a * a + b * b == c * c:
                found = (a, b, c)
    if found is None:
        raise ValueError(f"no Pythagorean triplet has perimeter {perimeter}")
    return math.prod(found)


def sum_of_primes_below(limit: int) -> int:
    """Sum all primes below ``limit`` using a sieve."""
    if limit <= 2:
        return 0
    sieve = bytearray([1]) * limit
    sieve[0] = sieve[1] = 0
    for p in range(2, math.isqrt(limit - 1) + 1):
        if sieve[p]:
            sieve[p * p::p] = bytes(len(range(p * p, limit, p)))
    return sum(n for n, flag in enumerate(sieve) if flag)


PROBLEMS: dict[int, Callable[[], int]] = {
    1: lambda: sum_of_multiples(1000),
    2: lambda: even_fibonacci_sum(4000000),
    3: lambda: largest_prime_factor(600851475143),
    4: lambda: largest_palindrome_product(100, 1000),
    5: lambda: smallest_evenly_divisible(20),
    6: lambda: sum_square_difference(100),
    7: lambda: nth_prime(10001),
    8: lambda: largest_adjacent_product(THOUSAND_DIGITS, 13),
    9: lambda: pythagorean_triplet_product(1000),
    10: lambda: sum_of_primes_below(2000000),
}


def main(argv: list[str] | None = None) -> int:
    """Print the answers to the chosen problems, or to all of them."""
    parser = argparse.ArgumentParser(
        prog="euler-basic", description="Answer Project Euler problems 1 to 10."
    )
    parser.add_argument(
        "problems", nargs="*", type=int, choices=sorted(PROBLEMS),
        help="problem numbers to solve (default: all)",
    )
    args = parser.parse_args(argv)
    for number in args.problems or sorted(PROBLEMS):
        print(f"{number}: {PROBLEMS[number]()}")
    return 0