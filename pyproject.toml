[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubeshell"
version = "0.1.0"
description = "A small command shell with a command registry, script runner, fstab parser and helper utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "scripting", "fstab", "arp", "fat"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cubeshell = "cubeshell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["cubeshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
