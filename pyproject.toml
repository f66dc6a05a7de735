[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "smashmap"
version = "0.1.0"
description = "A fixed-size chained hash map with verification and dumps, plus a word-frequency counter built on it"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash map", "hash table", "separate chaining", "word frequency", "buckets"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
smashmap = "smashmap.cli:main"

[tool.setuptools.packages.find]
include = ["smashmap*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
