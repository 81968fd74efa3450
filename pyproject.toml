[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "curvedesign"
version = "0.1.0"
description = "Interactive Hermite spline and NURBS curve editors with the curve mathematics behind them"
requires-python = ">=3.10"
dependencies = []
keywords = ["nurbs", "hermite", "spline", "curve", "geometry", "editor", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
curvedesign = "curvedesign.app:main"

[tool.hatch.build.targets.wheel]
packages = ["curvedesign"]

[tool.pytest.ini_options]
addopts = "-ra"
