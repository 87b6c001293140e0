[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dropflow"
version = "0.1.0"
description = "Persistence-based extrema pairing, camera settings tables and operator-interface state for microfluidics automation"
requires-python = ">=3.10"
keywords = [
    "microfluidics",
    "droplet",
    "persistence",
    "topological-data-analysis",
    "extrema",
    "plotting",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dropflow"]

[tool.hatch.build.targets.sdist]
include = ["dropflow", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
