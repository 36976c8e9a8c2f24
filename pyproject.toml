[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ugolki"
version = "0.1.0"
description = "The Ugolki (corners) board game against a simple computer opponent, with a pygame window"
requires-python = ">=3.10"
keywords = ["ugolki", "corners", "board game", "pygame", "path finding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ugolki = "ugolki.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ugolki"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
