[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cinemadesk"
version = "0.1.0"
description = "Plain-text record keeping for a small cinema: customers, show schedules and staff."
requires-python = ">=3.10"
dependencies = []
keywords = ["cinema", "schedule", "customers", "staff", "records", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
cinemadesk = "cinemadesk.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cinemadesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
