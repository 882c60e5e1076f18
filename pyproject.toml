[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seqfuzz"
version = "0.1.0"
description = "Edit distances and fuzzy string matching for arbitrary sequences"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "fuzzy",
    "string-matching",
    "levenshtein",
    "indel",
    "jaro-winkler",
    "edit-distance",
    "hamming",
    "osa",
]
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
    "Topic :: Text Processing :: General",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
seqfuzz-check = "seqfuzz.fuzzcheck:main"

[tool.hatch.build.targets.wheel]
packages = ["seqfuzz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
