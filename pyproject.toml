[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nbodysim"
version = "0.1.0"
description = "Gravitational n-body simulation core: body initialisation, time integration, and camera and colour helpers for visualisation"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["n-body", "gravity", "simulation", "galaxy", "physics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["nbodysim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
