[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tsmine"
version = "1.0.0"
description = "Time series segmentation helpers and closed chord mining over symbolic interval data"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "time series",
    "segmentation",
    "approximate entropy",
    "interval mining",
    "closed itemsets",
    "chord mining",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tsmine"]

[tool.hatch.build.targets.sdist]
include = ["tsmine", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
