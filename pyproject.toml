[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pang"
version = "0.1.0"
description = "Simulation core of a Pang-style arcade game: bouncing balls that split when shot, a player, harpoon bullets and drifting critters."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "pang", "simulation", "collision"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
