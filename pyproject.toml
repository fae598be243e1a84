[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hitlanes"
version = "0.1.0"
description = "A four-lane arcade hit-circle game with small helpers for input, logging, files and monitors"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "rhythm", "arcade", "pygame", "input"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hitlanes = "hitlanes.app:main"

[tool.hatch.build.targets.wheel]
packages = ["hitlanes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
