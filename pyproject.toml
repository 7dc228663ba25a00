[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "conquestchess"
version = "0.1.0"
description = "A two-player terminal chess variant where placed pieces conquer the squares they attack"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "board game", "terminal", "two-player", "conquest"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
conquestchess = "conquestchess.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["conquestchess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
