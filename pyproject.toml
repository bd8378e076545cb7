[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stkit"
version = "0.9.3"
description = "Terminal emulator helpers: box-drawing geometry, colour tweaks, farbfeld loading, URL finding, drag-and-drop decoding and key tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "box-drawing", "farbfeld", "keyboard", "escape-sequences"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
