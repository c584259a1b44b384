[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "s25util"
version = "0.1.0"
description = "Utility toolkit: binary files, serialization, MD5, tokenizing, time formatting, portable file names, system helpers and network message types"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "serialization",
    "binary",
    "md5",
    "tokenizer",
    "utilities",
    "portable-filenames",
]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["s25util"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
