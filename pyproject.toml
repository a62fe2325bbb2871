[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsexercises"
version = "0.1.0"
description = "Classic data-structure and algorithm exercises: shortest paths, spanning trees, sorting, string matching, Huffman coding, search puzzles, binary trees, linked lists and sparse matrices."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data structures",
    "graphs",
    "shortest path",
    "minimum spanning tree",
    "sorting",
    "kmp",
    "huffman",
    "sparse matrix",
    "binary tree",
    "linked list",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
dsexercises-shortest = "dsexercises.shortest:main"
dsexercises-search = "dsexercises.search:main"
dsexercises-lift = "dsexercises.lift:main"

[tool.hatch.build.targets.wheel]
packages = ["dsexercises"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
