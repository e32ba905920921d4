[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshgen"
version = "0.1.0"
description = "Procedural generation of 2D shapes, 3D paths and triangle meshes"
requires-python = ">=3.10"
dependencies = []
keywords = ["mesh", "geometry", "procedural", "3d", "shape", "path", "obj", "bezier"]
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
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["meshgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
