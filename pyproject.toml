[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deeplib"
version = "0.0.1"
description = "Small general-purpose toolkit: error codes, vector and matrix maths, files, images, PNG, threads and a runtime context."
requires-python = ">=3.10"
dependencies = []
keywords = ["maths", "vector", "matrix", "png", "image", "filesystem", "threading"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["deeplib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
