[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bstkit"
version = "0.1.0"
description = "Binary search tree building, editing, querying and iteration"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search tree", "bst", "tree", "iterator", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bstkit"]

[tool.pytest.ini_options]
addopts = "-ra"
