[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mfutils"
version = "0.1.0"
description = "Small utilities: pauseable clocks, lazy streams, fixed-size containers, console prompts, environment variables, local dates and filesystem helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["clock", "streams", "containers", "console", "environment", "filesystem", "datetime", "mmap"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mfutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
