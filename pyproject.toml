[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arana"
version = "0.1.0"
description = "MySQL wire-protocol building blocks: value encoding, column metadata, date and time conversion, escaping"
requires-python = ">=3.10"
dependencies = []
keywords = ["mysql", "protocol", "database", "wire-protocol", "encoding"]
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
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arana"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
