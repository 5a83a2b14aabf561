[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heapview"
version = "0.1.0"
description = "Data models and helpers for browsing heap allocation profiles: cost trees, top lists, stack views, size histograms and code navigation"
requires-python = ">=3.10"
dependencies = []
keywords = ["heap", "memory", "profiling", "allocations", "analysis"]
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
    "Topic :: Software Development :: Debuggers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["heapview"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
