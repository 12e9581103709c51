[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "railboard"
version = "2.1.0"
description = "Station signalling game logic: arrival and departure boards, shift reports and game settings"
requires-python = ">=3.10"
dependencies = []
keywords = ["railway", "signalling", "simulation", "game", "timetable"]
classifiers = [
    "Development Status :: 4 - Beta",
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

[tool.hatch.build.targets.wheel]
packages = ["railboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
