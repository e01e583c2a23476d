"""Project Euler 492: a quadratic recurrence reduced modulo primes."""

from __future__ import annotations

import argparse

from practicebox.euler_basic import is_prime


def _step(term: int, modulus: int) -> int:
    return (6 * term * term + 10 * term + 3) % modulus


def sequence_mod(n: int, prime: int) -> int:
    """Term ``n`` of a(1) = 1, a(k+1) = 6a(k)^2 + 10a(k) + 3, reduced modulo ``prime``.

    The sequence modulo a fixed number eventually repeats; once a repeat is
    found the remaining steps are skipped by its period.
    """
    if n < 1:
        raise ValueError("n must be positive")
    if prime < 1:
        raise ValueError("modulus must be positive")
    steps = n - 1
    hare = tortoise = 1 % prime
    power = period = 1
    index = 0
    while index < steps:
        if power == period:
            tortoise = hare
            power *= 2
            period = 0
        hare = _step(hare, prime)
        index += 1
        period += 1
        if hare == tortoise:
            for _ in range((steps - index) % period):
                hare = _step(hare, prime)
            return hare
    return hare


def sum_sequence_mods(start: int, span: int, n: int) -> int:
    """Sum ``sequence_mod(n, p)`` over primes p from ``start`` to ``start + span`` inclusive."""
    if span < 0:
        raise ValueError("span must not be negative")
    if n < 1:
        raise ValueError("n must be positive")
    return sum(
        sequence_mod(n, candidate)
        for candidate in range(start, start + span + 1)
        if is_prime(candidate)
    )


def count_primes_in_range(start: int, span: int) -> int:
    """Count primes from ``start`` up to but not including ``start + span``."""
    if span < 0:
        raise ValueError("span must not be negative")
    return sum(1 for candidate in range(start, start + span) if is_prime(candidate))


def main(argv: list[str] | None = None) -> int:
    """Sum the recurrence modulo a range of primes, or count the primes in a range."""
    parser = argparse.ArgumentParser(
        prog="euler-modular", description="Work on Project Euler problem 492."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    summing = commands.add_parser("sum", help="sum a(n) mod p over primes in a range")
    summing.add_argument("--start", type=int, default=10**9)
    summing.add_argument("--span", type=int, default=10**7)
    summing.add_argument("-n", type=int, default=10**15)
    counting = commands.add_parser("count", help="count the primes in a range")
    counting.add_argument("--start", type=int, default=10**9)
    counting.add_argument("--span", type=int, default=1000)
    args = parser.parse_args(argv)
    if args.command == "sum":
        print(sum_sequence_mods(args.start, args.span, args.n))
    else:
        print(count_primes_in_range(args.start, args.span))
    return 0