[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brickbreaker"
version = "0.1.0"
description = "Game model of a brick-breaking arcade game: balls, paddles, bricks, level files, scoring and a software framebuffer."
requires-python = ">=3.10"
dependencies = []
keywords = ["arcade", "breakout", "game", "bricks", "paddle", "framebuffer"]
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
packages = ["brickbreaker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
