[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minilibc"
version = "0.1.0"
description = "Small C library routines for Python: scanf-style input parsing, string and memory helpers, time and file-status records"
requires-python = ">=3.10"
dependencies = []
keywords = ["scanf", "sscanf", "strtok", "strings", "libc", "parsing"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minilibc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
