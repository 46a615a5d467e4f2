[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "particlefx"
version = "0.1.0"
description = "Building blocks for a 2D particle system: particles, emitter shapes, spawn strategies and behaviour modules."
requires-python = ">=3.10"
keywords = ["particles", "particle-system", "simulation", "graphics", "2d"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["particlefx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
