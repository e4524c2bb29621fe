[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcadebox"
version = "0.1.0"
description = "A small arcade platform with a curses display and Snake and Nibbler games"
requires-python = ">=3.10"
dependencies = []
keywords = ["arcade", "snake", "nibbler", "curses", "terminal", "game"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arcadebox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
