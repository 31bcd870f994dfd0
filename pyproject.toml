[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chainlist"
version = "0.1.0"
description = "A singly linked list of unsigned 32-bit integers with positional insert, find, remove and cursor-style iterators."
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "data structure", "iterator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["chainlist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
