[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algoset"
version = "0.1.0"
description = "Small, self-contained algorithm solutions: strings, arrays, heaps, graphs, arithmetic, counting and thread alternation."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "puzzles", "dynamic-programming", "graphs", "heaps"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[tool.hatch.build.targets.wheel]
packages = ["algoset"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
