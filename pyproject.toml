[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadlite"
version = "0.1.0"
description = "Game-loop building blocks: rectangles, RGBA images, a sprite atlas, input state, frame timing, profiling zones, coroutines, state machines and a node scene."
requires-python = ">=3.10"
dependencies = ["pillow"]
keywords = ["game", "gamedev", "scene", "coroutines", "atlas", "input", "profiler"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quadlite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
