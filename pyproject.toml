[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minigrep"
version = "0.1.0"
description = "A small grep-like tool for searching files and standard input with regular expressions"
requires-python = ">=3.10"
dependencies = []
keywords = ["grep", "search", "regex", "text", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minigrep = "minigrep.app:main"

[tool.hatch.build.targets.wheel]
packages = ["minigrep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
