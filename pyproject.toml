[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillbox"
version = "0.1.0"
description = "Classic programming drills: an LRU cache, maze paths, knapsack, LCS, tree traversal, searching, a doubly linked list and 4x4 tic-tac-toe."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "exercises",
    "knapsack",
    "lru-cache",
    "tic-tac-toe",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
drillbox-knapsack = "drillbox.knapsack:main"
drillbox-lcs = "drillbox.lcs:main"
drillbox-linked-list = "drillbox.doubly_linked_list:main"
drillbox-tictactoe = "drillbox.tictactoe:main"

[tool.hatch.build.targets.wheel]
packages = ["drillbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
