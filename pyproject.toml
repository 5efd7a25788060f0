[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixscale"
version = "0.1.7"
description = "Alpha association, alpha scanning and resampling weight computation for image scaling"
requires-python = ">=3.10"
dependencies = []
keywords = ["scale", "resize", "image-resize", "premultiply", "alpha", "resampling", "filter-weights"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pixscale"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
