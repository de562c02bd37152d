[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "framekit"
version = "0.1.0"
description = "A small 2D game framework: layered scenes, game objects with components, box colliders, sprite animation, input and timing, on top of pygame."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "2d", "framework", "pygame", "collision", "animation", "scene"]
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
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["framekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
