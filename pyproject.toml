[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boxpush"
version = "0.1.0"
description = "Simulate a robot pushing boxes around a warehouse grid and score the final layout"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "grid", "simulation", "warehouse", "sokoban"]
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
boxpush = "boxpush.part1:main"
boxpush-wide = "boxpush.part2:main"

[tool.hatch.build.targets.wheel]
packages = ["boxpush"]

[tool.pytest.ini_options]
addopts = "-ra"
