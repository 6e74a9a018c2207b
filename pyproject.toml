[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mu2e_overlays"
version = "0.1.0"
description = "Data types, register decoders and fragment overlays for Mu2e DTC readout data"
requires-python = ">=3.10"
dependencies = []
keywords = ["mu2e", "daq", "dtc", "fragment", "readout", "physics"]
classifiers = [
    "Development Status :: 4 - Beta",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mu2e_overlays"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
