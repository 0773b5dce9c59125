[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "saphire"
version = "0.1.0"
description = "A tree-walking interpreter and REPL for the Saphire programming language"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "programming-language", "repl", "lexer", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
saphire = "saphire.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["saphire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
