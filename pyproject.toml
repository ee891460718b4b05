[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fixedarena"
version = "0.3.4"
description = "An arena that stores items in fixed-size chunks so every allocation takes constant time"
requires-python = ">=3.10"
dependencies = []
keywords = ["arena", "constant-time", "fixed-size", "latency", "chunks"]
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
packages = ["fixedarena"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
