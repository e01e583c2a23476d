"""Project Euler problems on divisors, digit sums, chains and calendars."""

from __future__ import annotations

import argparse
import math
import re
from datetime import date
from itertools import count
from pathlib import Path
from typing import Callable, Iterable

_ONES = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)
_TENS = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
)


def _digit_sum(number: int) -> int:
    return sum(int(digit) for digit in str(number))


def count_divisors(number: int) -> int:
    """Count the positive divisors of ``number``, itself and 1 included."""
    if number < 1:
        raise ValueError("number must be positive")
    total = 1
    remaining = number
    factor = 2
    while factor * factor <= remaining:
        exponent = 0
        while remaining % factor == 0:
            remaining //= factor
            exponent += 1
        total *= exponent + 1
        factor += 1
    if remaining > 1:
        total *= 2
    return total


def first_triangle_with_divisors(minimum: int) -> int:
    """First triangle number with more than ``minimum`` divisors."""
    for n in count(1):
        # n and n + 1 are coprime, so the divisor count of n(n+1)/2 factors.
        if n % 2 == 0:
            left, right = n // 2, n + 1
        else:
            left, right = n, (n + 1) // 2
        if count_divisors(left) * count_divisors(right) > minimum:
            return n * (n + 1) // 2
    raise AssertionError("unreachable")


def collatz_next(number: int) -> int:
    """Next term of the Collatz sequence: halve even numbers, else 3n + 1."""
    if number < 1:
        raise ValueError("number must be positive")
    return number // 2 if number % 2 == 0 else 3 * number + 1


def longest_collatz_chain(limit: int) -> tuple[int, int]:
    """Start below ``limit`` with the longest Collatz chain, and that chain's term count.

    Ties go to the smallest start.
    """
    if limit < 2:
        raise ValueError("limit must be at least 2")
    lengths = [0] * limit
    lengths[1] = 1
    best = (1, 1)
    for start in range(2, limit):
        term = start
        steps = 0
        while term >= start:
            term = collatz_next(term)
            steps += 1
        lengths[start] = steps + lengths[term]
        if lengths[start] > best[1]:
            best = (start, lengths[start])
    return best


def power_digit_sum(base: int, exponent: int) -> int:
    """Sum of the decimal digits of ``base ** exponent``."""
    if base < 0 or exponent < 0:
        raise ValueError("base and exponent must not be negative")
    return _digit_sum(base ** exponent)


def _spell(number: int) -> str:
    if number == 1000:
        return "onethousand"
    hundreds, rest = divmod(number, 100)
    words = ""
    if hundreds:
        words += _ONES[hundreds] + "hundred"
        if rest:
            words += "and"
    if rest < 20:
        words += _ONES[rest]
    else:
        tens, ones = divmod(rest, 10)
        words += _TENS[tens] + _ONES[ones]
    return words


def number_letter_count() -> int:
    """Letters used writing out 1 to 1000 in British English, without spaces or hyphens."""
    return sum(len(_spell(n)) for n in range(1, 1001))


def counting_sundays(start_year: int, end_year: int) -> int:
    """Count months whose first day is a Sunday, from ``start_year`` to ``end_year`` inclusive."""
    if start_year < 1 or end_year > 9999:
        raise ValueError("years must lie between 1 and 9999")
    if start_year > end_year:
        raise ValueError("start_year must not come after end_year")
    return sum(
        1
        for year in range(start_year, end_year + 1)
        for month in range(1, 13)
        if date(year, month, 1).weekday() == 6
    )


def factorial_digit_sum(n: int) -> int:
    """Sum of the decimal digits of ``n!``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _digit_sum(math.factorial(n))


def sum_proper_divisors(number: int) -> int:
    """Sum of the divisors of ``number`` smaller than itself."""
    if number < 0:
        raise ValueError("number must not be negative")
    if number <= 1:
        return 0
    total = 1
    for divisor in range(2, math.isqrt(number) + 1):
        if number % divisor == 0:
            total += divisor
            other = number // divisor
            if other != divisor:
                total += other
    return total


def _divisor_sums(limit: int) -> list[int]:
    sums = [0] * max(limit, 0)
    for divisor in range(1, limit // 2 + 1):
        for multiple in range(2 * divisor, limit, divisor):
            sums[multiple] += divisor
    return sums


def amicable_sum(limit: int) -> int:
    """Sum of the amicable numbers below ``limit``."""
    sums = _divisor_sums(limit)
    total = 0
    for number in range(2, limit):
        partner = sums[number]
        if partner == number:
            continue
        back = sums[partner] if partner < limit else sum_proper_divisors(partner)
        if back == number:
            total += number
    return total


def name_score(name: str) -> int:
    """Alphabetical value of a name: A is 1, B is 2 and so on, case ignored."""
    letters = name.upper()
    if not all("A" <= letter <= "Z" for letter in letters):
        raise ValueError(f"name must contain only the letters A to Z: {name!r}")
    return sum(ord(letter) - ord("A") + 1 for letter in letters)


def total_name_scores(names: Iterable[str]) -> int:
    """Sum, over the names in alphabetical order, of each score times its position."""
    ordered = sorted(name.upper() for name in names)
    return sum(position * name_score(name) for position, name in enumerate(ordered, 1))


def is_abundant(number: int) -> bool:
    """Tell whether the proper divisors of ``number`` add up to more than it."""
    return sum_proper_divisors(number) > number


def non_abundant_sum(limit: int) -> int:
    """Sum of the positive integers below ``limit`` that are not a sum of two abundant numbers."""
    if limit <= 1:
        return 0
    sums = _divisor_sums(limit)
    abundant = [n for n in range(1, limit) if sums[n] > n]
    expressible = bytearray(limit)
    for index, first in enumerate(abundant):
        for second in abundant[index:]:
            total = first + second
            if total >= limit:
                break
            expressible[total] = 1
    return sum(n for n in range(1, limit) if not expressible[n])


def _read_names(path: Path) -> list[str]:
    text = path.read_text()
    tokens = (token.strip().strip('"').strip() for token in re.split(r"[,\n]", text))
    return [token for token in tokens if token]


def _collatz_answer() -> str:
    start, length = longest_collatz_chain(3000001)
    return f"{start} ({length} terms)"


PROBLEMS: dict[int, Callable[[], object]] = {
    12: lambda: first_triangle_with_divisors(500),
    14: _collatz_answer,
    16: lambda: power_digit_sum(2, 1000),
    17: number_letter_count,
    19: lambda: counting_sundays(1901, 2000),
    20: lambda: factorial_digit_sum(100),
    21: lambda: amicable_sum(10000),
    23: lambda: non_abundant_sum(28125),
}
NAMES_PROBLEM = 22


def main(argv: list[str] | None = None) -> int:
    """Print the answers to the chosen problems, or to all of them."""
    choices = sorted([*PROBLEMS, NAMES_PROBLEM])
    parser = argparse.ArgumentParser(
        prog="euler-numbers",
        description="Answer Project Euler problems 12, 14 and 16 to 23.",
    )
    parser.add_argument(
        "problems", nargs="*", type=int, choices=choices,
        help="problem numbers to solve (default: all)",
    )
    parser.add_argument(
        "--names", type=Path, help="file of names for problem 22, comma or line separated",
    )
    args = parser.parse_args(argv)
    if args.problems:
        chosen = args.problems
        if NAMES_PROBLEM in chosen and args.names is None:
            parser.error("problem 22 needs --names")
    else:
        chosen = [n for n in choices if n != NAMES_PROBLEM or args.names is not None]
    for number in chosen:
        if number == NAMES_PROBLEM:
            answer = total_name_scores(_read_names(args.names))
        else:
            answer = PROBLEMS[number]()
        print(f"{number}: {answer}")
    return 0