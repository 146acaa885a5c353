[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "middb"
version = "0.1.0"
description = "Building blocks for a log-structured key-value store: bloom filters, B+ trees, table schemas and leveled compaction planning."
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "lsm", "bloom-filter", "bptree", "compaction", "key-value"]
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
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["middb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
