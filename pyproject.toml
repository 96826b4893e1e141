[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polynum"
version = "0.1.0"
description = "A small hierarchy of polymorphic number types (Int, Double, Float, Complex) with mixed arithmetic and comparison"
requires-python = ">=3.10"
dependencies = []
keywords = ["numbers", "polymorphism", "arithmetic", "complex", "sorting"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
polynum-demo = "polynum.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["polynum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
