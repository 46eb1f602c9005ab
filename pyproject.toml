[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treds"
version = "0.1.0"
description = "Radix-tree building blocks, command handlers and an interactive command-line client for a key/value server"
requires-python = ">=3.10"
keywords = ["key-value", "radix tree", "database", "in-memory", "cli", "sorted set"]
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
    "Topic :: Database :: Database Engines/Servers",
]
dependencies = [
    "prompt-toolkit",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
treds-cli = "treds.client:main"

[tool.hatch.build.targets.wheel]
packages = ["treds"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
