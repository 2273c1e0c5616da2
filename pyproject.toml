[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kplc"
version = "0.1.0"
description = "Scanner and symbol table for the KPL teaching language, with a word-index tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "scanner", "lexer", "symbol table", "kpl", "word index"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kplc-scan = "kplc.scan:main"
kplc-symtab-demo = "kplc.symtab_demo:main"
kplc-wordindex = "kplc.wordindex:main"

[tool.hatch.build.targets.wheel]
packages = ["kplc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
