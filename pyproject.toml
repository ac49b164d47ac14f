[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "berchk"
version = "0.1.0"
description = "Validate .ber tile maps for a collect-and-exit puzzle game, with the string, memory and line-reading helpers it uses"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "map", "validation", "flood-fill", "ber"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
berchk = "berchk.loader:main"

[tool.hatch.build.targets.wheel]
packages = ["berchk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
