[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dojo"
version = "0.1.0"
description = "Coding-dojo katas (FizzBuzz, prime factors, poker hands), a terminal 2048 game and small service helpers"
requires-python = ">=3.11"
keywords = ["kata", "tdd", "fizzbuzz", "prime-factors", "poker", "2048", "dojo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "requests",
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
dojo-2048 = "dojo.twenty48.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dojo"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
