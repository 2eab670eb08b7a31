[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pharmastock"
version = "0.1.0"
description = "Small inventory manager for medicines and parapharmacy products backed by SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["pharmacy", "inventory", "stock", "sqlite", "medicine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pharmastock = "pharmastock.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pharmastock"]

[tool.pytest.ini_options]
addopts = "-ra"
