[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hsh"
version = "0.1.0"
description = "A small command interpreter that runs programs found on PATH"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "interpreter", "unix"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
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
hsh = "hsh.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["hsh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
