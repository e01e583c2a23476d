"""Practice programs: a student sorter, Project Euler solutions and console exercises."""

__version__ = "0.1.0"
__all__ = [
    "students",
    "studentmenu",
    "euler_basic",
    "euler_grid",
    "euler_numbers",
    "euler_modular",
    "daily",
]