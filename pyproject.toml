[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "forestfire"
version = "0.1.0"
description = "Grid-based forest fire simulation with a fleeing animal, wind directions and an iteration log"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "forest fire", "cellular automaton", "grid", "wind"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
forestfire = "forestfire.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["forestfire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
