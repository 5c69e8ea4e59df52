[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pipeline2"
version = "0.1.0"
description = "Run two commands as a pipeline between an input file and an output file"
requires-python = ">=3.10"
dependencies = []
keywords = ["pipe", "pipeline", "shell", "redirection", "subprocess", "PATH"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
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
pipeline2 = "pipeline2.pipeline:main"

[tool.hatch.build.targets.wheel]
packages = ["pipeline2"]

[tool.pytest.ini_options]
addopts = "-ra"
