[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcgreeks"
version = "0.1.0"
description = "Monte Carlo pricing and Malliavin-weight Greeks for digital, corridor and Asian options"
requires-python = ">=3.10"
dependencies = []
keywords = ["monte carlo", "options", "greeks", "malliavin", "pricing", "finance"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mcgreeks = "mcgreeks.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mcgreeks"]

[tool.pytest.ini_options]
addopts = "-ra"
