[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minicore"
version = "0.1.0"
description = "A small set of everyday Unix command-line utilities behind a single entry point"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "coreutils",
    "unix",
    "command-line",
    "shell",
    "utilities",
    "cat",
    "ls",
    "checksum",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minicore = "minicore.main:main"

[tool.hatch.build.targets.wheel]
packages = ["minicore"]

[tool.hatch.build.targets.sdist]
include = ["minicore", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
