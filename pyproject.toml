[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "suitxn"
version = "0.1.0"
description = "BCS-serializable Sui transaction types: build, encode and decode transaction data."
requires-python = ">=3.10"
dependencies = []
keywords = ["sui", "bcs", "transaction", "serialization", "move", "blockchain"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["suitxn"]

[tool.pytest.ini_options]
addopts = "-ra"
