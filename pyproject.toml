[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "laneplan"
version = "0.1.0"
description = "Straight-lane motion planning scenes for a simulated car, drawn in a pygame window or recorded headless"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["planning", "autonomous driving", "simulation", "kinematics", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
laneplan = "laneplan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["laneplan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
