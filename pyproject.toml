[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gemheist"
version = "0.1.0"
description = "Loading and validation of .ber tile maps for a gem-collecting puzzle, with small text, byte, list and formatting helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "tile-map", "ber", "map-validation", "printf"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gemheist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
