[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cee"
version = "0.1.0"
description = "Tokenizer and parser for a small C-like language, with token and syntax tree dump commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["tokenizer", "parser", "ast", "compiler", "language"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
cee = "cee.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cee"]

[tool.pytest.ini_options]
addopts = "-ra"
