[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ponca"
version = "0.1.0"
description = "Point cloud analysis building blocks: fit states, distance weight functions, a line primitive and bounded priority queues"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["point cloud", "geometry", "fitting", "weight function", "priority queue"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "numpy",
]

[tool.hatch.build.targets.wheel]
packages = ["ponca"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
