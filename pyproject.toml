[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aslib"
version = "0.1.0"
description = "Small building blocks: a bubble sort, a fixed-size managed heap, a tail-tracking array and block-oriented memory I/O"
requires-python = ">=3.10"
dependencies = []
keywords = ["heap", "allocator", "bubble sort", "array", "block device", "memory io"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aslib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
