[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sessionlore"
version = "0.1.0"
description = "View state, cursor navigation and text rendering for a terminal browser of coding-assistant session logs"
requires-python = ">=3.10"
dependencies = []
keywords = ["tui", "terminal", "sessions", "navigation", "rendering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sessionlore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
