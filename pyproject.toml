[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lsview"
version = "0.1.0"
description = "Terminal rendering of file listings: styled cells, tables, tree drawing and metadata columns"
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["ls", "terminal", "table", "tree", "ansi", "file listing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["lsview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
