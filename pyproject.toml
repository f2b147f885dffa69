[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kinechain"
version = "0.1.0"
description = "Interactive two-arm kinematic chain simulation with obstacles and a configuration-space view"
requires-python = ">=3.10"
keywords = [
    "kinematics",
    "robotics",
    "inverse-kinematics",
    "configuration-space",
    "collision",
    "simulation",
    "pygame",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kinechain = "kinechain.window:main"

[tool.hatch.build.targets.wheel]
packages = ["kinechain"]

[tool.pytest.ini_options]
addopts = "-ra"
