[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tensorkit"
version = "0.1.0"
description = "Small n-dimensional tensor containers with row-major strides, typed storage and simple math helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["tensor", "ndarray", "strides", "dtype", "math"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tensorkit-math = "tensorkit.mathutils:main"
tensorkit-tensor-demo = "tensorkit.tensor_demo:main"
tensorkit-dense-demo = "tensorkit.dense_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["tensorkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
