[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bowguy"
version = "0.1.0"
description = "The Tale of Bow Guy: a top-down arcade shooter with a plain-text tile map format, built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "shooter", "pygame", "tile-map"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
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
bowguy = "bowguy.game:main"
roboguy = "bowguy.roboguy:main"

[tool.hatch.build.targets.wheel]
packages = ["bowguy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
