[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sfstd"
version = "0.1.0"
description = "Small standard utilities: string-keyed hash map, dynamic vector, byte buffer, vectors and file helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["hashmap", "vector", "buffer", "fnv1a", "utilities"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[tool.hatch.build.targets.wheel]
packages = ["sfstd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
