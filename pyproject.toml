[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "vesselsim"
version = "0.1.0"
description = "Stochastic simulation of chemical reaction networks in a vessel, with a small reaction-building syntax"
requires-python = ">=3.10"
dependencies = [
    "matplotlib",
]
keywords = ["chemistry", "stochastic simulation", "reaction network", "gillespie", "biochemistry"]
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
    "Topic :: Scientific/Engineering :: Chemistry",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
vesselsim-circadian = "vesselsim.circadian:main"

[tool.setuptools.packages.find]
include = ["vesselsim*"]

[tool.pytest.ini_options]
addopts = "-ra"
