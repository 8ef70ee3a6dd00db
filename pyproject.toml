[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "templweaver"
version = "0.1.0"
description = "A small step-by-step tower defense simulation with a login service and a method-checked route table"
requires-python = ">=3.10"
dependencies = []
keywords = ["tower defense", "simulation", "game", "routing"]
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
packages = ["templweaver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
