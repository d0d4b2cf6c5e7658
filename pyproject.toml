[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilemerge"
version = "0.1.0"
description = "A sliding-tile number merging puzzle played in the terminal, with small game-loop helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["2048", "puzzle", "game", "tiles", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
tilemerge = "tilemerge.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tilemerge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
