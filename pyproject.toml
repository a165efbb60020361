[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sudu"
version = "0.1.0"
description = "Front end for the sudu language: lexer, diagnostics and literal parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "tokenizer", "diagnostics", "language"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sudu = "sudu.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sudu"]

[tool.pytest.ini_options]
addopts = "-ra"
