[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeoncrawl"
version = "0.1.0"
description = "A turn-based terminal dungeon crawler: find the Amulet of Yala before the monsters find you."
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "dungeon", "game", "terminal", "curses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dungeoncrawl = "dungeoncrawl.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeoncrawl"]

[tool.pytest.ini_options]
addopts = "-ra"
