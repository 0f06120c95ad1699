[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "auxengine"
version = "0.1.0"
description = "A small application engine core: frame clock, input bindings, logging, INI/CSV/JSON helpers and file utilities."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "engine",
    "game-loop",
    "input",
    "ini",
    "csv",
    "json",
    "logging",
    "crc32",
]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["auxengine"]

[tool.hatch.build.targets.sdist]
include = ["auxengine", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
