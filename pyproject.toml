[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eco2d"
version = "0.1.0"
description = "Game-state models for a 2D sandbox simulation: camera, rules, assets, items, crafting, replays and UI helpers."
requires-python = ">=3.10"
dependencies = [
    "msgpack",
]
keywords = ["game", "simulation", "crafting", "sandbox", "replay"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["eco2d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
