[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "todoboard"
version = "0.1.0"
description = "A small to-do board that keeps tasks by category in an SQLite file"
requires-python = ">=3.10"
dependencies = []
keywords = ["todo", "tasks", "sqlite", "deadlines", "categories"]
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
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
todoboard = "todoboard.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["todoboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
