[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taestore"
version = "0.1.0"
description = "Building blocks for a transactional analytical storage engine: buffer management, identifiers, file naming and catalog primitives."
requires-python = ">=3.10"
dependencies = []
keywords = ["storage", "database", "buffer-manager", "mvcc", "catalog"]
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
packages = ["taestore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
