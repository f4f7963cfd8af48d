[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algobox"
version = "0.1.0"
description = "Classic algorithms and data structures: sorting, linked lists, graph search, grid search, shortest paths, union-find and spanning trees."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "graphs",
    "sorting",
    "shortest-path",
    "union-find",
    "minimum-spanning-tree",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algobox-patterns = "algobox.patterns:main"
algobox-currency = "algobox.currency:main"

[tool.hatch.build.targets.wheel]
packages = ["algobox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
