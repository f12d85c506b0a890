[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wargrid"
version = "0.1.0"
description = "Turn-based grid war simulation in which armies wander a map, seize provinces, gather resources and fight battles"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "war", "strategy", "grid", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wargrid = "wargrid.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["wargrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
