[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lexkit"
version = "0.1.0"
description = "Lexing toolkit: input cursor and error positions, byte helpers, number parsing and formatting, a streaming JSON parser and an XML lexer"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "parser", "json", "xml", "tokenizer", "number-formatting"]
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
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lexkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
