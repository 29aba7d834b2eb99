[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinycomp"
version = "0.1.0"
description = "A small compiler for a toy language that emits accumulator-machine assembly"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "scanner", "parser", "code generation", "assembly"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinycomp = "tinycomp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tinycomp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
