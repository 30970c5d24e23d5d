[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hub75panel"
version = "0.1.0"
description = "Coordinate mapping, LED driver start-up sequences and bitmap icons for chained HUB75 LED matrix panels"
requires-python = ">=3.10"
dependencies = []
keywords = ["hub75", "led", "matrix", "panel", "coordinates", "fm6124", "dp3246", "xbm"]
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
    "Topic :: Multimedia :: Graphics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hub75panel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
