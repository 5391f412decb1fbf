[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "elorpg"
version = "0.1.0"
description = "A small tile-based adventure: collect every item, then reach the exit."
requires-python = ">=3.10"
keywords = ["game", "puzzle", "tile", "xpm", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
elorpg = "elorpg.app:main"

[tool.hatch.build.targets.wheel]
packages = ["elorpg"]

[tool.pytest.ini_options]
addopts = "-ra"
