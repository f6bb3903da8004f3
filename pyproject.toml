[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "featurekit"
version = "1.0.0"
description = "Small helpers for type checks, algorithms, error handling, randomness, timing and strings"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "result", "exceptions", "timing", "benchmark", "random", "strings"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["featurekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
