[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "railshot"
version = "0.1.0"
description = "Frame-driven game logic for a rail shooter: vector and matrix math, camera shake, timed calls, enemy spawn scripts and screen flow"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rail-shooter", "matrix", "vector", "camera", "shake"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["railshot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
