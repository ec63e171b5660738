[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gisapp"
version = "0.1.0"
description = "A small desktop geographic information system window that keeps track of a project file and a map image"
requires-python = ">=3.10"
dependencies = []
keywords = ["gis", "map", "geographic", "desktop", "tkinter"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gisapp = "gisapp.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gisapp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
