[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crashnet"
version = "0.1.0"
description = "Cluster traffic crash records into intersections, build a proximity graph and rank the most connected and most severe sites"
requires-python = ">=3.10"
keywords = ["traffic", "crashes", "intersections", "graph", "spatial clustering", "csv"]
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
    "Topic :: Scientific/Engineering :: Information Analysis",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
crashnet = "crashnet.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["crashnet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
