[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "abismo"
version = "0.1.0"
description = "A terminal grid game: reach the exit before the computer players, and stay out of the abyss."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "grid", "puzzle", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
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
abismo = "abismo.main:main"

[tool.hatch.build.targets.wheel]
packages = ["abismo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
