[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bpdf"
version = "0.1.0"
description = "Building blocks for grid-based PDF documents: properties, geometry, metrics and a cell-drawing pipeline"
requires-python = ">=3.10"
dependencies = []
keywords = ["pdf", "document", "layout", "grid", "metrics"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bpdf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
