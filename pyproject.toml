[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "indexed_array"
version = "0.1.0"
description = "Fixed-size arrays, spans and bitsets indexed by ranges, enums, value sequences or functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["array", "enum", "indexing", "bitset", "multidimensional", "container"]
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
packages = ["indexed_array"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
