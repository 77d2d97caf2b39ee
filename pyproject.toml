[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meteorfall"
version = "0.1.0"
description = "A small arcade shooter: steer a ship and shoot down falling asteroids before they reach the ground."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "asteroids", "shooter", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
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
meteorfall = "meteorfall.main:main"

[tool.hatch.build.targets.wheel]
packages = ["meteorfall"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
