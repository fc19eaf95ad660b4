[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pegpairs"
version = "0.1.0"
description = "Token queues, pairs and position cursors for building PEG parser output trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["peg", "parser", "parsing", "tokens", "pairs", "syntax-tree"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: General",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pegpairs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
