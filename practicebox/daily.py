"""Two small console exercises: a greeting and a life-expectancy estimate."""

from __future__ import annotations

import argparse
import enum
import re
import sys
import time
from dataclasses import dataclass

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_GENDER_MENU = (
    "Are you male or female?\n"
    "1) Male\n"
    "2) Female\n"
    "Choose option 1 or 2: "
)

_ESTIMATE_NOTE = (
    "Based on estimates by the World Health Organization, and without considering "
    "other factors, if you were to live to the average life expectancy for somebody "
    "of your gender, this is how much longer you have to live. Have a nice day!\n"
)


class Gender(enum.Enum):
    """Gender as numbered in the menu, with its average US life expectancy."""

    MALE = 1
    FEMALE = 2

    @property
    def life_expectancy(self) -> float:
        return _LIFE_EXPECTANCY[self]


_LIFE_EXPECTANCY = {Gender.MALE: 77.4, Gender.FEMALE: 82.2}


@dataclass(frozen=True)
class LifeRemaining:
    """Expected time left, expressed in several units."""

    years: int
    months: int
    days: int
    hours: int
    minutes: int
    seconds: int


def parse_age(text: str) -> int:
    """Read a leading integer from ``text``; 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _chomp(text: str) -> str:
    return text.removesuffix("\n")


def greeting(name: str, age: int, username: str) -> str:
    """Build the reply to the three questions."""
    return f"Hi {name}, you're {age} years old, and your username is {username}."


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def life_remaining(gender: Gender | int, age: int) -> LifeRemaining:
    """Estimate the time left for someone of ``gender`` now ``age`` years old."""
    expectancy = Gender(gender).life_expectancy
    years = int(expectancy - age)
    days = years * 365 + _trunc_div(years, 4)
    hours = days * 24
    minutes = hours * 60
    return LifeRemaining(
        years=years,
        months=years * 12,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=minutes * 60,
    )


def format_life_remaining(remaining: LifeRemaining) -> str:
    """Render the estimate as one labelled line per unit."""
    return (
        f"Years: \t\t{remaining.years}\n"
        f"Months: \t{remaining.months}\n"
        f"Days: \t\t{remaining.days}\n"
        f"Hours: \t\t{remaining.hours}\n"
        f"Minutes: \t{remaining.minutes}\n"
        f"Seconds: \t{remaining.seconds}\n"
    )


def _ask(prompt: str) -> str:
    sys.stdout.write(prompt)
    sys.stdout.flush()
    line = sys.stdin.readline()
    if not line:
        raise EOFError("input ended")
    return line


def greet_main(argv: list[str] | None = None) -> int:
    """Ask for a name, an age and a user name, then greet the user."""
    parser = argparse.ArgumentParser(
        prog="greet", description="Ask a few questions and answer with a greeting."
    )
    parser.parse_args(argv)
    print("Well, I'm going to ask you a few questions.\n")
    try:
        name = _chomp(_ask("What is your name? "))
        age = parse_age(_ask("How old are you? "))
        username = _chomp(_ask("Please enter your user name: "))
    except EOFError:
        return 1
    print(greeting(name, age, username))
    return 0


def _ask_gender() -> Gender:
    while True:
        line = _ask(_GENDER_MENU)
        match = _LEADING_INT.match(line)
        if match and int(match.group(1)) in (1, 2):
            return Gender(int(match.group(1)))
        print("Just pick 1 or 2 please.")


def life_main(argv: list[str] | None = None) -> int:
    """Ask for gender and age, then print the estimated time left to live."""
    parser = argparse.ArgumentParser(
        prog="life", description="Estimate remaining life from US life expectancy."
    )
    parser.add_argument(
        "--delay", type=float, default=3.0,
        help="seconds to pause before showing the result (default: 3)",
    )
    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("--delay must not be negative")
    print(
        "Hi, this calculator will estimate your life expectancy given your gender "
        "and current age. (Based off US life expectancy)"
    )
    try:
        gender = _ask_gender()
        age = parse_age(_ask("How old are you (in years)?\n> "))
    except EOFError:
        return 1
    print("Calculating....")
    time.sleep(args.delay)
    sys.stdout.write(_ESTIMATE_NOTE)
    sys.stdout.write(format_life_remaining(life_remaining(gender, age)))
    return 0