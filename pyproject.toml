[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atnrt"
version = "0.1.0"
description = "Runtime pieces for ATN-based lexers and parsers: ATN deserialization, DFA states and error listeners"
requires-python = ">=3.10"
dependencies = []
keywords = ["atn", "dfa", "parser", "lexer", "grammar", "deserializer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
atnrt-codegen = "atnrt.codegen:main"

[tool.hatch.build.targets.wheel]
packages = ["atnrt"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
