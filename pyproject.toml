[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "olympiad"
version = "0.1.0"
description = "Solutions to classic olympiad and contest problems as plain Python functions"
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = ["algorithms", "competitive-programming", "olympiad", "graphs", "dynamic-programming"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["olympiad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
