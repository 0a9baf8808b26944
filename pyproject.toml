[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "warzone"
version = "0.1.0"
description = "A console turn-based territory conquest game: map loading, orders, cards and players"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "strategy", "turn-based", "conquest", "map", "console"]
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
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
warzone = "warzone.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["warzone"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
