[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tileengine"
version = "0.1.0"
description = "A small tile-based game engine with actors, components and text-file levels"
requires-python = ">=3.10"
keywords = ["game", "engine", "tiles", "pygame", "puzzle", "actors"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tileengine = "tileengine.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["tileengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
