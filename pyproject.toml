[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "questrpg"
version = "0.1.0"
description = "A small top-down role-playing game on tile maps: cross three monster worlds with a hero who walks and shoots."
requires-python = ">=3.10"
keywords = ["game", "rpg", "pygame", "tile-map", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
questrpg = "questrpg.render:main"

[tool.hatch.build.targets.wheel]
packages = ["questrpg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
