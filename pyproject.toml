[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matrixclock"
version = "0.1.0"
description = "Building blocks for an LED matrix clock: bitmap fonts, date strings, an HC-SR04 distance sensor model and JSON buffer helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["led-matrix", "clock", "bitmap-font", "hc-sr04", "json", "embedded"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["matrixclock"]

[tool.pytest.ini_options]
addopts = "-ra"
