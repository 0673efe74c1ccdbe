[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinycad"
version = "0.0.1"
description = "A small command-line CAD tool: cubes and spheres to STL, 2D sketches to DXF"
requires-python = ">=3.10"
dependencies = []
keywords = ["cad", "stl", "dxf", "sketch", "mesh", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinycad = "tinycad.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tinycad"]

[tool.pytest.ini_options]
addopts = "-ra"
