[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sweepkit"
version = "0.1.0"
description = "Spline curves, swept surfaces, OBJ output and small vector math for 3D modeling"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bezier",
    "bspline",
    "spline",
    "surface of revolution",
    "generalized cylinder",
    "obj",
    "vector",
    "matrix",
    "quaternion",
    "arcball",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sweepkit = "sweepkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sweepkit"]

[tool.pytest.ini_options]
addopts = "-ra"
