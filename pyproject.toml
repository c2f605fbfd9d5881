[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "so_long"
version = "0.1.0"
description = "Rules, map loading and XPM sprite decoding for a small tile-based puzzle game."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "tile", "map", "xpm"]
classifiers = [
    "Development Status :: 4 - Beta",
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
packages = ["so_long"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
