# practicebox

A collection of small console programs and functions for practising
programming: an interactive student record sorter, solutions to a range of
Project Euler problems, and two short console exercises. It needs nothing
beyond the Python standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Student sorter

```
practicebox-students
```

Asks how many students to enter (1 to 10), then for each one a name (at most
30 characters are kept; an empty name is refused), a positive ID number and a
GPA between 0.0 and 4.0. A menu then lets you:

1. sort and print the students by name,
2. sort and print them by ID number (ascending or descending),
3. sort and print them by GPA (ascending or descending),
4. enter a new set of students,
5. print the students as they stand,
6. exit.

Invalid input is reported and asked for again. If input ends before the
program is told to exit, it stops with exit status 1.

The same operations are available from Python in `practicebox.students`.
The sort functions return new lists and keep the order of equal entries:

```python
from practicebox.students import Student, SortOrder, sort_by_gpa, format_student

students = [Student("ada", 7, 3.5), Student("bob", 3, 2.0)]
for student in sort_by_gpa(students, SortOrder.DESCENDING):
    print(format_student(student), end="")
```

`parse_student_count`, `parse_student_id` and `parse_gpa` read a value from a
line of text and raise `ValueError` when it is out of range.
`practicebox.studentmenu.StudentMenu` runs the menu over any pair of text
streams, which makes it easy to drive from a script.

## Project Euler

Each command prints the answers to its group of problems, one per line as
`number: answer`. Give problem numbers as arguments to solve only those.

```
practicebox-euler-basic               # problems 1 to 10
practicebox-euler-grid                # problems 11, 13, 15 and 18
practicebox-euler-numbers             # problems 12, 14, 16, 17, 19 to 21 and 23
practicebox-euler-numbers 22 --names names.txt
```

Problem 22 needs a file of names, separated by commas or new lines (quotes
around names are allowed). No such file comes with the package; without
`--names` the problem is skipped when running all problems, and asking for it
by number is an error.

Problem 492 has its own command with two subcommands:

```
practicebox-euler-modular sum --start 1000000000 --span 10000000 -n 1000000000000000
practicebox-euler-modular count --start 1000000000 --span 1000
```

`sum` adds up term `n` of the sequence a(1) = 1, a(k+1) = 6a(k)² + 10a(k) + 3
modulo every prime from `start` to `start + span`; `count` counts the primes
from `start` up to, not including, `start + span`. The values shown are the
defaults. With the default range, `sum` tests ten million candidates by trial
division and runs for a very long time.

Some of the other answers, such as the sum of primes below two million or the
longest Collatz chain under three million, also take a while in pure Python.

The functions behind the commands take their limits as arguments, so smaller
cases can be tried directly:

```python
from practicebox.euler_basic import sum_of_multiples, nth_prime
from practicebox.euler_grid import lattice_paths
from practicebox.euler_numbers import power_digit_sum, factorial_digit_sum

sum_of_multiples(10)       # 23
nth_prime(6)               # 13
lattice_paths(2)           # 6
power_digit_sum(2, 15)     # 26
factorial_digit_sum(10)    # 27
```

`practicebox.euler_numbers.total_name_scores` takes the names for problem 22
as any iterable of strings.

## Console exercises

```
practicebox-greet
```

Asks for your name, age and user name and greets you with them.

```
practicebox-life
practicebox-life --delay 0
```

Asks for your gender and age and estimates, from average US life expectancy
(77.4 years for men, 82.2 for women), how many years, months, days, hours,
minutes and seconds you have left. It pauses for `--delay` seconds (3 by
default) before showing the result. The calculation itself is
`practicebox.daily.life_remaining`.