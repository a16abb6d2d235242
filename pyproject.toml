[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "graalcuts"
version = "0.1.0"
description = "Particle identification cuts for tagged-photon beam detector data, organised by data-taking period"
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "particle identification", "graphical cuts", "polygon", "photoproduction"]
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
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["graalcuts*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
