[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rdecontainers"
version = "0.1.0"
description = "Lightweight container classes: linked lists, fixed-capacity lists and arrays, intrusive lists, bounded and copy-on-write strings, and search helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "containers",
    "linked list",
    "intrusive list",
    "fixed array",
    "copy-on-write",
    "string",
    "lower_bound",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rdecontainers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
