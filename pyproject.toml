[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metrolist"
version = "0.1.0"
description = "Interactive directory of cities and the people living in them, kept as doubly linked lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked-list", "doubly-linked-list", "data-structures", "cli", "directory"]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
metrolist = "metrolist.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["metrolist"]

[tool.pytest.ini_options]
addopts = "-ra"
