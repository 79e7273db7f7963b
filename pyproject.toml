[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "depsched"
version = "0.1.0"
description = "A small task scheduler that runs dependent computations in dependency order"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduler", "tasks", "dependency-graph", "topological-sort", "futures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
depsched = "depsched.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["depsched"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
