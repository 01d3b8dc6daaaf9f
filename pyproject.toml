[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bfgen"
version = "0.1.0"
description = "Run Brainfuck programs or translate them into C source code"
requires-python = ">=3.10"
dependencies = []
keywords = ["brainfuck", "interpreter", "compiler", "code generation", "esoteric"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bfgen = "bfgen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bfgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
