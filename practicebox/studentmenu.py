"""Interactive menu for entering, sorting and listing students."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, TextIO, TypeVar

from practicebox.students import (
    MAX_NAME_LENGTH,
    SortOrder,
    Student,
    format_student,
    parse_gpa,
    parse_student_count,
    parse_student_id,
    sort_by_gpa,
    sort_by_id,
    sort_by_name,
)

T = TypeVar("T")

MAIN_MENU = (
    "----------MENU OPTIONS:----------\n"
    "1) Sort and print student names alphabetically\n"
    "2) Sort and print by student numbers\n"
    "3) Sort and print by GPA\n"
    "4) Get new student information\n"
    "5) Print student information\n"
    "6) Exit the program\n"
)

SUBMENU = (
    "--SUBMENU OPTIONS:--\n"
    "1) Ascending order\n"
    "2) Descending order\n"
)


def _parse_name(text: str) -> str:
    name = text.rstrip("\r\n")[:MAX_NAME_LENGTH]
    if not name:
        raise ValueError("Invalid input, please re-enter student name.")
    return name


def _choice_parser(low: int, high: int, message: str) -> Callable[[str], int]:
    def parse(text: str) -> int:
        fields = text.split()
        try:
            choice = int(fields[0]) if fields else None
        except ValueError:
            choice = None
        if choice is None or not low <= choice <= high:
            raise ValueError(message)
        return choice

    return parse


_parse_menu = _choice_parser(1, 6, "Invalid input, please select one of the menu choices.")
_parse_order = _choice_parser(1, 2, "Invalid input, please select one of the two choices.")


class StudentMenu:
    """Prompts on one stream and reads answers from another, re-asking on bad input."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.students: list[Student] = []

    def _read_line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise EOFError("input ended")
        return line

    def _ask(self, prompt: str, parse: Callable[[str], T]) -> T:
        while True:
            self.stdout.write(prompt)
            try:
                return parse(self._read_line())
            except ValueError as exc:
                self.stdout.write(f"{exc}\n")

    def ask_student_count(self) -> int:
        """Ask how many students follow."""
        return self._ask("Enter the number of students>", parse_student_count)

    def ask_students(self, count: int) -> list[Student]:
        """Ask for each student's name, ID and GPA; the result replaces the roster."""
        students = []
        for number in range(1, count + 1):
            name = self._ask(f"Enter name of student #{number}>", _parse_name)
            student_id = self._ask(
                f"Enter student number for student #{number}>", parse_student_id
            )
            gpa = self._ask(f"Enter GPA for student #{number}>", parse_gpa)
            students.append(Student(name, student_id, gpa))
        self.students = students
        return students

    def ask_order(self) -> SortOrder:
        """Ask whether to sort ascending or descending."""
        return SortOrder(self._ask(SUBMENU + "Choose option: ", _parse_order))

    def ask_menu_choice(self) -> int:
        """Show the main menu and return a choice from 1 to 6."""
        return self._ask(MAIN_MENU + "Enter your menu choice> ", _parse_menu)

    def print_students(self) -> None:
        """Write every student in the current order."""
        for student in self.students:
            self.stdout.write(format_student(student))

    def run(self) -> None:
        """Collect students, then serve the menu until the user chooses to exit."""
        self.ask_students(self.ask_student_count())
        while True:
            choice = self.ask_menu_choice()
            if choice == 1:
                self.students = sort_by_name(self.students)
                self.print_students()
            elif choice == 2:
                self.students = sort_by_id(self.students, self.ask_order())
                self.print_students()
            elif choice == 3:
                self.students = sort_by_gpa(self.students, self.ask_order())
                self.print_students()
            elif choice == 4:
                self.ask_students(self.ask_student_count())
            elif choice == 5:
                self.print_students()
            else:
                self.stdout.write("Have a nice day!\n")
                return


def main(argv: list[str] | None = None) -> int:
    """Run the student menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="studentmenu", description="Enter students and list them in sorted order."
    )
    parser.parse_args(argv)
    menu = StudentMenu(sys.stdin, sys.stdout)
    try:
        menu.run()
    except EOFError:
        return 1
    return 0