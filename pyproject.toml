[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xtkit"
version = "0.1.0"
description = "Fixed-size tuples, zipping, unzipping, cross joins and helpers for empty and optional values."
requires-python = ">=3.10"
dependencies = []
keywords = ["tuples", "zip", "unzip", "cartesian product", "coalesce", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xtkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
