[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchtrees"
version = "0.1.0"
description = "Binary search trees and AVL trees as key-value maps, with small object-oriented examples"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search tree", "avl", "tree", "data structures", "map"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
searchtrees-bst = "searchtrees.bst:main"
searchtrees-avl = "searchtrees.avl:main"
searchtrees-accounts = "searchtrees.accounts:main"
searchtrees-people = "searchtrees.people:main"

[tool.hatch.build.targets.wheel]
packages = ["searchtrees"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
