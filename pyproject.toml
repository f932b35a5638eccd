[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcdoclex"
version = "0.1.0"
description = "Lexer, error types and resource identifiers for the MCDOC schema language used to describe Minecraft datapacks"
requires-python = ">=3.10"
dependencies = []
keywords = ["mcdoc", "minecraft", "datapack", "lexer", "tokenizer", "schema"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mcdoclex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
