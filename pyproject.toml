[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lengthtree"
version = "0.1.0"
description = "Group words by length in a binary search tree and write its traversals"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search tree", "traversal", "words", "text"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lengthtree = "lengthtree.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lengthtree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
