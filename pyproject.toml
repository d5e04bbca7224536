[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "argoscli"
version = "0.1.0"
description = "Building blocks for declarative command line definitions: arguments, options, commands and an option tokenizer."
requires-python = ">=3.10"
dependencies = []
keywords = ["command line", "arguments", "options", "cli", "subcommands"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["argoscli"]

[tool.hatch.build.targets.sdist]
include = ["argoscli", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
