[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wildfire-sim"
version = "0.1.0"
description = "Game rules for a firefighting management simulation: attributes, callouts, hiring, fleet and resources."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "game", "firefighting", "dispatch", "management"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wildfire_sim"]

[tool.pytest.ini_options]
addopts = "-ra"
