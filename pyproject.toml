[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mangen"
version = "0.1.0"
description = "Generate a directory manifest: every file's relative path with its Adler-32 checksum"
requires-python = ">=3.10"
dependencies = []
keywords = ["manifest", "checksum", "adler32", "directory", "hash"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mangen = "mangen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mangen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
