[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crusty"
version = "0.1.0"
description = "Small data structures, iterator adapters, sorting algorithms and ownership primitives"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sorting",
    "linked-list",
    "iterators",
    "channels",
    "data-structures",
    "comprehension",
]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["crusty"]

[tool.pytest.ini_options]
addopts = "-ra"
