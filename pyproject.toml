[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "carfactory"
version = "1.0.0"
description = "Interactive console car assembly line: pick parts, then run or test the finished car"
requires-python = ">=3.10"
dependencies = []
keywords = ["car", "assembly", "simulation", "console", "menu"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Korean",
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
carfactory = "carfactory.app:main"

[tool.hatch.build.targets.wheel]
packages = ["carfactory"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
