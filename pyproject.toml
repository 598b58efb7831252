[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "supersnake"
version = "1.0.0"
description = "A terminal snake game with power fruit, wall wrapping and emoji themes"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "terminal", "arcade", "emoji"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
supersnake = "supersnake.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["supersnake"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
