[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skyfinder"
version = "0.1.0"
description = "Building blocks for astronomical source finding: parameter files, tables, matrices, Gaussian statistics, file paths and a pixel stack."
requires-python = ">=3.10"
dependencies = []
keywords = ["astronomy", "source finding", "radio astronomy", "parameters", "matrix", "covariance"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["skyfinder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
