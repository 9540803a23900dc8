[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mhdflow"
version = "0.1.0"
description = "Two-dimensional ideal MHD and hydrodynamics solver using the MacCormack predictor-corrector scheme"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["mhd", "hydrodynamics", "maccormack", "finite-difference", "shock", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
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

[project.scripts]
mhdflow = "mhdflow.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mhdflow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
