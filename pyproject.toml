[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shkit"
version = "0.1.0"
description = "Building blocks for a small shell: character and string helpers, chunked line reading, environment handling and builtins"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "builtins", "environment", "string-utilities", "line-reader"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shkit"]

[tool.pytest.ini_options]
addopts = "-ra"
