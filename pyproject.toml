[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fullfetch"
version = "2.1.1"
description = "Configurable terminal system information fetch tool with ASCII art and colour schemes"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["fetch", "system-information", "terminal", "cli", "ascii-art"]
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
    "Topic :: System :: Monitoring",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fullfetch = "fullfetch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fullfetch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
