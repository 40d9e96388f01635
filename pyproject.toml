[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cfgtree"
version = "0.1.0"
description = "Typed node tree for configuration values (integers, floats, arrays, maps) with serialization to configuration text, plus RGB/RGBA colour helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["configuration", "config", "serialization", "tree", "color"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cfgtree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
