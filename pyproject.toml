[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skirace"
version = "0.1.0"
description = "Process biathlon race event logs into a readable event log and per-competitor results"
requires-python = ">=3.10"
dependencies = []
keywords = ["biathlon", "skiing", "race", "results", "event log"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
skirace = "skirace.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["skirace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
