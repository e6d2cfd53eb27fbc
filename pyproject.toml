[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moonfield"
version = "0.1.0"
description = "A small top-down farming sandbox with a lunar calendar, seasons and a day/night cycle"
requires-python = ">=3.10"
keywords = ["game", "farming", "sandbox", "pygame", "calendar", "day-night"]
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
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
moonfield = "moonfield.game:main"

[tool.hatch.build.targets.wheel]
packages = ["moonfield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
