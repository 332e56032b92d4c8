[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazechase"
version = "0.1.0"
description = "A tile-based maze chase arcade game with pathfinding monsters and a built-in map editor"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "maze", "pathfinding", "a-star", "pygame"]
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
mazechase = "mazechase.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mazechase"]

[tool.pytest.ini_options]
addopts = "-ra"
