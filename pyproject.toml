[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pwkit"
version = "0.1.0"
description = "Read PCK game archives and parse the icon lists and text tables stored inside them"
requires-python = ">=3.10"
dependencies = []
keywords = ["pck", "pkx", "archive", "game-data", "zlib", "config-parsing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving",
    "Topic :: File Formats",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pwkit = "pwkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pwkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
