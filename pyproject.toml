[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "subasta"
version = "0.1.0"
description = "A small interactive auction of lots, with bidding and status reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["auction", "bidding", "lots", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
subasta = "subasta.cli:main"
subasta-peliculas = "subasta.movies:main"
subasta-grabaciones = "subasta.recordings:main"

[tool.hatch.build.targets.wheel]
packages = ["subasta"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
