[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonecs"
version = "0.1.0"
description = "A small tile-based dungeon game built on an entity-component system with pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "dungeon", "ecs", "entity-component-system", "tilemap", "pygame"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dungeonecs = "dungeonecs.game:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeonecs"]

[tool.pytest.ini_options]
addopts = "-ra"
