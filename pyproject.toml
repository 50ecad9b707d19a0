[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matcalc"
version = "0.1.0"
description = "Composable operations on small bounded integer square matrices"
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "calculator", "transpose", "composition"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["matcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
