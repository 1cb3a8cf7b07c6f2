[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polyharmonic"
version = "0.1.0"
description = "Annual solar energy estimates from polyharmonic interpolation of efficiencies over sun directions"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "solar",
    "concentrated solar power",
    "heliostat",
    "direct normal irradiance",
    "polyharmonic",
    "radial basis functions",
    "interpolation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
polyharmonic-energy = "polyharmonic.annual_energy:main"

[tool.hatch.build.targets.wheel]
packages = ["polyharmonic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
