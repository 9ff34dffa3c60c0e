[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contra-player"
version = "0.1.0"
description = "Player movement, tile collision, hit flashing and sprite poses for a side-scrolling run-and-gun game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "side-scroller", "tile-map", "collision"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["contra_player"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
