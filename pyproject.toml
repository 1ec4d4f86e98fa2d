[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tspbound"
version = "0.1.0"
description = "Exact travelling salesman solver using branch and bound over TSPLIB coordinate files"
requires-python = ">=3.10"
dependencies = []
keywords = ["tsp", "travelling salesman", "branch and bound", "tsplib", "optimization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
tspbound = "tspbound.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tspbound"]

[tool.pytest.ini_options]
addopts = "-ra"
