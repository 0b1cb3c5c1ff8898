[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chipate"
version = "0.1.0"
description = "A small CHIP-8 interpreter core with a pygame display"
requires-python = ">=3.10"
keywords = ["chip8", "chip-8", "emulator", "interpreter", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chipate = "chipate.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chipate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
