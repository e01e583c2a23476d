"""Student records, their orderings and validation of typed-in fields."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from operator import attrgetter
from typing import Iterable

MAX_STUDENTS = 10
MAX_NAME_LENGTH = 30
MIN_GPA = 0.0
MAX_GPA = 4.0

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass(frozen=True)
class Student:
    """One student: a name, a positive ID number and a GPA from 0.0 to 4.0."""

    name: str
    student_id: int
    gpa: float


class SortOrder(enum.Enum):
    """Direction of a sort, numbered as in the submenu."""

    ASCENDING = 1
    DESCENDING = 2


def _is_descending(order: SortOrder | int) -> bool:
    return SortOrder(order) is SortOrder.DESCENDING


def sort_by_name(students: Iterable[Student]) -> list[Student]:
    """Return the students ordered alphabetically by name; ties keep their order."""
    return sorted(students, key=attrgetter("name"))


def sort_by_id(students: Iterable[Student], order: SortOrder | int) -> list[Student]:
    """Return the students ordered by ID number in the given direction."""
    return sorted(students, key=attrgetter("student_id"), reverse=_is_descending(order))


def sort_by_gpa(students: Iterable[Student], order: SortOrder | int) -> list[Student]:
    """Return the students ordered by GPA in the given direction."""
    return sorted(students, key=attrgetter("gpa"), reverse=_is_descending(order))


def format_student(student: Student) -> str:
    """Render one student as the block shown in listings, blank line included."""
    return (
        f"Student name:\t{student.name}\n"
        f"ID number:\t\t{student.student_id}\n"
        f"GPA:\t\t\t{student.gpa:f}\n"
        "\n"
    )


def _leading_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def parse_student_count(text: str) -> int:
    """Read a count of students from 1 to MAX_STUDENTS; trailing text is ignored."""
    count = _leading_int(text)
    if count is None or not 1 <= count <= MAX_STUDENTS:
        raise ValueError(
            f"Invalid input, must be a positive integer from 1 to {MAX_STUDENTS}."
        )
    return count


def parse_student_id(text: str) -> int:
    """Read a positive student ID number."""
    student_id = _leading_int(text)
    if student_id is None or student_id <= 0:
        raise ValueError(
            "Invalid input, student ID number must be a positive integer."
        )
    return student_id


def parse_gpa(text: str) -> float:
    """Read a GPA between MIN_GPA and MAX_GPA inclusive."""
    match = _LEADING_FLOAT.match(text)
    gpa = float(match.group(1)) if match else None
    if gpa is None or not MIN_GPA <= gpa <= MAX_GPA:
        raise ValueError("Invalid input, GPA must be a number between 0.0 and 4.0")
    return gpa