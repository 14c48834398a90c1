[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazewalk"
version = "0.1.0"
description = "Solve character-grid mazes with depth-first and breadth-first search and show the cells each search visited"
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "dfs", "bfs", "search", "grid", "puzzle"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mazewalk = "mazewalk.cli:main"
mazewalk-classic = "mazewalk.classic:main"

[tool.hatch.build.targets.wheel]
packages = ["mazewalk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
