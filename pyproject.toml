[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eidoplot"
version = "0.1.0"
description = "Declarative plotting: describe a figure, then draw it to SVG or PNG surfaces"
requires-python = ">=3.10"
keywords = ["plot", "plotting", "chart", "svg", "png", "visualization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Multimedia :: Graphics",
]
dependencies = ["pillow"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
eidoplot-sine = "eidoplot.sine:main"

[tool.hatch.build.targets.wheel]
packages = ["eidoplot"]

[tool.pytest.ini_options]
addopts = "-ra"
