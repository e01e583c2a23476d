[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practicebox"
version = "0.1.0"
description = "Small practice programs: an interactive student sorter, Project Euler solutions and two console exercises"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "project-euler", "exercises", "sorting", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
practicebox-students = "practicebox.studentmenu:main"
practicebox-euler-basic = "practicebox.euler_basic:main"
practicebox-euler-grid = "practicebox.euler_grid:main"
practicebox-euler-numbers = "practicebox.euler_numbers:main"
practicebox-euler-modular = "practicebox.euler_modular:main"
practicebox-greet = "practicebox.daily:greet_main"
practicebox-life = "practicebox.daily:life_main"

[tool.hatch.build.targets.wheel]
packages = ["practicebox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
