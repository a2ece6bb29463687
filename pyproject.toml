[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dialpuzzles"
version = "0.1.0"
description = "Solvers for four small daily puzzles: a safe dial, repeated product-id ranges, battery joltage and a paper-roll grid."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "solver", "grid", "dial", "joltage"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dialpuzzles-day1 = "dialpuzzles.day1:main"
dialpuzzles-day2 = "dialpuzzles.day2:main"
dialpuzzles-day3 = "dialpuzzles.day3:main"
dialpuzzles-day4 = "dialpuzzles.day4:main"

[tool.hatch.build.targets.wheel]
packages = ["dialpuzzles"]

[tool.hatch.build.targets.sdist]
include = ["dialpuzzles", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
