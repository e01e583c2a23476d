import io

import pytest

from practicebox.studentmenu import StudentMenu, main
from practicebox.students import SortOrder, Student

ENTRIES = "3\nCarol\n30\n2.5\nAlice\n10\n3.9\nBob\n20\n3.1\n"


def make_menu(text):
    out = io.StringIO()
    return StudentMenu(io.StringIO(text), out), out


def positions(output, names):
    return [output.index(f"Student name:\t{name}\n") for name in names]


def test_ask_student_count_retries_until_valid():
    menu, out = make_menu("0\n11\nabc\n4\n")
    assert menu.ask_student_count() == 4
    text = out.getvalue()
    assert text.count("Invalid input, must be a positive integer from 1 to 10.") == 3
    assert text.count("Enter the number of students>") == 4


def test_ask_students_collects_and_validates():
    menu, out = make_menu("Ada\n-1\n7\n5\n3.5\n")
    students = menu.ask_students(1)
    assert students == [Student("Ada", 7, 3.5)]
    assert menu.students == students
    text = out.getvalue()
    assert "Invalid input, student ID number must be a positive integer." in text
    assert "Invalid input, GPA must be a number between 0.0 and 4.0" in text


def test_ask_students_rejects_empty_name_and_truncates():
    long_name = "N" * 40
    menu, out = make_menu(f"\n{long_name}\n1\n1.0\n")
    students = menu.ask_students(1)
    assert students[0].name == long_name[:30]
    assert "Invalid input, please re-enter student name." in out.getvalue()


def test_ask_order_retries():
    menu, out = make_menu("3\nx\n2\n")
    assert menu.ask_order() is SortOrder.DESCENDING
    assert out.getvalue().count("Invalid input, please select one of the two choices.") == 2


def test_ask_menu_choice_shows_menu():
    menu, out = make_menu("7\n5\n")
    assert menu.ask_menu_choice() == 5
    text = out.getvalue()
    assert text.count("----------MENU OPTIONS:----------") == 2
    assert "Invalid input, please select one of the menu choices." in text


def test_print_students_writes_each_block():
    menu, out = make_menu("")
    menu.students = [Student("Bob", 20, 3.1), Student("Alice", 10, 3.9)]
    menu.print_students()
    text = out.getvalue()
    assert positions(text, ["Bob", "Alice"]) == sorted(positions(text, ["Bob", "Alice"]))
    assert text.count("Student name:") == 2


def test_run_sorts_by_name_then_exits():
    menu, out = make_menu(ENTRIES + "1\n6\n")
    menu.run()
    text = out.getvalue()
    assert [s.name for s in menu.students] == ["Alice", "Bob", "Carol"]
    listed = positions(text, ["Alice", "Bob", "Carol"])
    assert listed == sorted(listed)
    assert text.endswith("Have a nice day!\n")


def test_run_sorts_by_id_descending():
    menu, _ = make_menu(ENTRIES + "2\n2\n6\n")
    menu.run()
    assert [s.student_id for s in menu.students] == [30, 20, 10]


def test_run_sorts_by_gpa_ascending():
    menu, _ = make_menu(ENTRIES + "3\n1\n6\n")
    menu.run()
    assert [s.gpa for s in menu.students] == [2.5, 3.1, 3.9]


def test_run_replaces_students_with_option_four():
    menu, _ = make_menu(ENTRIES + "4\n1\nZoe\n99\n4.0\n5\n6\n")
    menu.run()
    assert menu.students == [Student("Zoe", 99, 4.0)]


def test_run_raises_on_end_of_input():
    menu, _ = make_menu(ENTRIES + "5\n")
    with pytest.raises(EOFError):
        menu.run()


def test_main_exits_cleanly(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(ENTRIES + "6\n"))
    assert main([]) == 0
    assert "Have a nice day!" in capsys.readouterr().out


def test_main_reports_end_of_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1