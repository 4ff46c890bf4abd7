[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nextline"
version = "0.1.0"
description = "Buffered line-by-line reading from file descriptors, one reader or many at once."
requires-python = ">=3.10"
keywords = ["readline", "file descriptor", "buffered", "lines"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nextline"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
