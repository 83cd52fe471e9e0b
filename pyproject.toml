[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pyminishell"
version = "0.1.0"
description = "Lexing, variable expansion and pipeline parsing for a small POSIX-style shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "lexer", "parser", "pipeline", "variable-expansion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pyminishell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
